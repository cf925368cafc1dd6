[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listbench"
version = "0.1.0"
description = "Interactive menus and a timing benchmark for a dynamic array, a singly linked list and a doubly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "dynamic array", "data structures", "benchmark", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
listbench = "listbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["listbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
