[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms: 0/1 knapsack, graph traversal trees, Strassen multiplication and comparison-counting sorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "knapsack", "bfs", "dfs", "strassen", "sorting", "benchmark"]
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

[project.scripts]
algokit-knapsack = "algokit.knapsack:main"
algokit-traversal = "algokit.traversal:main"
algokit-strassen = "algokit.matrix:main"
algokit-sort-benchmark = "algokit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"
