from tapioca.module import Module


class _Failing(Module):
    def init(self) -> bool:
        return False


def test_default_initialisation_succeeds():
    module = Module()
    assert module.init() is True
    assert module.init_config() is True


def test_base_hooks_still_apply_to_a_subclass():
    module = _Failing()
    assert Module.init(module) is True
    assert Module.init_config(module) is True


def test_default_hooks_return_nothing():
    module = Module()
    assert module.update(16) is None
    assert module.fixed_update() is None
    assert module.render() is None
    assert module.refresh() is None
    assert module.start() is None