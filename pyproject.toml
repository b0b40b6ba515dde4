[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslab"
version = "0.1.0"
description = "Small data structures, searches and CPU scheduling algorithms, each with an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "circular queue",
    "stack",
    "binary search",
    "cpu scheduling",
    "round robin",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslab-doubly-linked = "dslab.doubly_linked:main"
dslab-circular-queue = "dslab.circular_queue:main"
dslab-singly-linked = "dslab.singly_linked:main"
dslab-stack = "dslab.stack:main"
dslab-search = "dslab.search:main"
dslab-scheduling = "dslab.scheduling:main"

[tool.hatch.build.targets.wheel]
packages = ["dslab"]

[tool.hatch.build.targets.sdist]
include = ["dslab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
