[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lshell"
version = "0.1.0"
description = "A small interactive line shell with command history, line editing and built-in commands"
requires-python = ">=3.10"
keywords = ["shell", "repl", "terminal", "command-line", "history", "line-editing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lshell = "lshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["lshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
