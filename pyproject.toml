[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and algorithms: heaps, disjoint sets, graphs, treaps, string search and a 15-puzzle solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binomial-heap",
    "fibonacci-heap",
    "union-find",
    "graph",
    "spanning-tree",
    "treap",
    "prefix-function",
    "aho-corasick",
    "suffix-tree",
    "15-puzzle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-puzzle = "algolab.puzzle:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
