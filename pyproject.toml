[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sotile"
version = "0.1.0"
description = "A small tile-based maze game: collect every item, avoid the enemies, reach the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "maze", "xpm", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sotile = "sotile.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sotile"]

[tool.pytest.ini_options]
addopts = "-ra"
