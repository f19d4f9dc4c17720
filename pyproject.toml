[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstextbook"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, trees, graphs, shortest paths and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "stack",
    "queue",
    "binary tree",
    "heap",
    "graph",
    "shortest path",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dstextbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
