[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ministructs"
version = "0.1.0"
description = "Small classic data structures: chained hash table, linked lists, queue, skip list and n-ary tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "hash-table", "linked-list", "queue", "skip-list", "tree"]
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
ministructs-demo = "ministructs.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ministructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
