[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysh"
version = "0.1.0"
description = "Building blocks of a Unix shell: command parsing, environment, aliases, expansion, program lookup, jobs, history and built-in commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tcsh", "command-line", "job-control", "aliases", "history"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mysh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
