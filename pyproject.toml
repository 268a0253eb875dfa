[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questmenu"
version = "0.1.0"
description = "A small game menu with a bottom row of image buttons that switch between screens"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "menu", "pygame", "buttons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
questmenu = "questmenu.app:main"

[tool.hatch.build.targets.wheel]
packages = ["questmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
