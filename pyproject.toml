[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfcompile"
version = "0.3.0"
description = "Compile Brainfuck, with a few extra commands, to C and build it with gcc"
requires-python = ">=3.10"
dependencies = []
keywords = ["brainfuck", "compiler", "esoteric", "c", "code-generation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bfcompile = "bfcompile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfcompile"]

[tool.pytest.ini_options]
addopts = "-ra"
