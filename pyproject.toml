[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms for study: graphs, sorting, dynamic programming, search and growth-rate tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "shortest-paths",
    "minimum-spanning-tree",
    "max-flow",
    "vertex-cover",
    "subset-sum",
    "sorting",
    "matrix-chain",
    "strassen",
    "rabin-karp",
    "branch-and-bound",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-subset-sum = "algolab.subset_sum:main"
algolab-vertex-cover = "algolab.vertex_cover:main"
algolab-growth = "algolab.growth:main"
algolab-bellman-ford = "algolab.bellman_ford:main"
algolab-fifteen-puzzle = "algolab.fifteen_puzzle:main"
algolab-dijkstra = "algolab.dijkstra:main"
algolab-sorting = "algolab.sorting:main"
algolab-max-flow = "algolab.max_flow:main"
algolab-matrix-chain = "algolab.matrix_chain:main"
algolab-mst = "algolab.mst:main"
algolab-rabin-karp = "algolab.rabin_karp:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
