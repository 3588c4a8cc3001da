[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlox"
version = "0.0.1"
description = "A small bytecode compiler and virtual machine for arithmetic Lox expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "interpreter", "bytecode", "virtual-machine", "compiler"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rlox = "rlox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rlox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
