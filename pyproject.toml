[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tree-edit"
version = "0.3.0"
description = "Print modified parse trees by applying node-level edits, for codemod, linting and refactoring tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["codemod", "linting", "parsing", "refactoring", "syntax-tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tree_edit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
