"""Base class for the engine's modules."""

from __future__ import annotations


class Module:
    """An engine subsystem driven by the main loop.

    The default hooks only keep track of how the loop has driven the module;
    subclasses override what they need.
    """

    started: bool = False
    elapsed: int = 0
    fixed_steps: int = 0
    frames_rendered: int = 0
    refreshes: int = 0

    def init(self) -> bool:
        """Initialise the module; return whether it succeeded."""
        return True

    def init_config(self) -> bool:
        """Apply the configuration given by the game; return whether it succeeded."""
        return True

    def start(self) -> None:
        """Prepare the module right before the loop starts."""
        self.started = True

    def update(self, delta_time: int) -> None:
        """Advance the module by ``delta_time`` milliseconds."""
        self.elapsed += delta_time

    def fixed_update(self) -> None:
        """Advance the module by one fixed time step."""
        self.fixed_steps += 1

    def render(self) -> None:
        """Draw whatever the module is responsible for."""
        self.frames_rendered += 1

    def refresh(self) -> None:
        """Discard whatever the module has marked for removal."""
        self.refreshes += 1