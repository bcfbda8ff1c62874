[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapioca"
version = "0.1.0"
description = "Core of a small component-based game engine: vectors, quaternions, components, game objects, scenes and a fixed-step main loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "entity component", "scene graph", "quaternion", "vector math", "game loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tapioca"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
