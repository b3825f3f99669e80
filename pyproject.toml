[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vnreg"
version = "0.1.0"
description = "A small visual-novel engine that reads .reg scripts and turns them into render blocks"
requires-python = ">=3.10"
keywords = ["visual novel", "script", "parser", "game engine", "pygame"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vnreg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
