[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algos"
version = "0.1.0"
description = "Small, readable implementations of classic search, graph, pair-sum and sliding-window algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary-search",
    "bfs",
    "sliding-window",
    "two-pointer",
    "factorial",
    "substrings",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algos = "algos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
