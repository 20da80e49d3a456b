[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cogame"
version = "4.1.0"
description = "A small scene-and-object game framework with a side-scrolling streaming game built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "side-scroller", "platformer", "scene manager", "game objects", "tilemap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cogame"]

[tool.hatch.build.targets.sdist]
include = ["cogame", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
