[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boringkit"
version = "0.1.0"
description = "Classic data structures and graph algorithms: linked lists, vectors, red-black trees, hash maps, entity maps and sets, priority queues, BFS/DFS, MST and shortest paths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "red-black-tree",
    "hashmap",
    "linked-list",
    "heap-sort",
    "graph",
    "dijkstra",
    "bellman-ford",
    "kruskal",
    "prim",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["boringkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
