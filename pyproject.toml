[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqlab"
version = "0.1.0"
description = "Array- and linked-list-backed sequences in mutable and immutable flavours, with an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["sequence", "linked list", "dynamic array", "immutable", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
seqlab = "seqlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seqlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
