[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uvasolve"
version = "0.1.0"
description = "Solutions to classic UVa Online Judge exercises, as plain functions and a command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["uva", "online-judge", "competitive-programming", "algorithms", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uvasolve = "uvasolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uvasolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
