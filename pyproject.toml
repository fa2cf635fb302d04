[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algobench"
version = "0.1.0"
description = "Classic search structures: a linked list, binary search and AVL trees, and chained hash tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary search tree",
    "avl tree",
    "hash table",
    "linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["algobench*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
