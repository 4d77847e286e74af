[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pimplstack"
version = "0.1.0"
description = "A stack with interchangeable backing containers: a dynamic array or a singly linked list"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "linked list", "forward list", "data structures", "container"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pimplstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
