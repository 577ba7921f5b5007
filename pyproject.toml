[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deepclone"
version = "0.1.0"
description = "Deep copies of arbitrary object graphs, with cycle handling and per-type custom copy hooks"
requires-python = ">=3.10"
dependencies = []
keywords = ["deepcopy", "copy", "clone", "object graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["deepclone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
