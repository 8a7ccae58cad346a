[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and graph algorithms: heaps, Huffman coding, traversals, shortest paths, spanning trees and hash tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "heap",
    "priority-queue",
    "huffman",
    "graph",
    "dfs",
    "bfs",
    "dijkstra",
    "prim",
    "bellman-ford",
    "floyd-warshall",
    "topological-sort",
    "hash-table",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-weighted = "algolab.weighted:main"
algolab-paths = "algolab.paths:main"
algolab-words = "algolab.words:main"

[tool.setuptools.packages.find]
include = ["algolab*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
