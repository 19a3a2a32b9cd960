[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogger"
version = "0.1.0"
description = "Screens, sprite-sheet drawing, input and sound for a Frogger-style arcade game on pygame, plus a 16x16 dot-matrix glyph set."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["frogger", "arcade", "game", "pygame", "sprites", "dot-matrix"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["frogger"]

[tool.pytest.ini_options]
addopts = "-ra"
