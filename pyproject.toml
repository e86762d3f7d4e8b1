[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aialgos"
version = "0.1.0"
description = "Classic AI search and constraint algorithms: A*, AO*, N-queens, graph colouring, BFS/DFS and two-player tic-tac-toe"
requires-python = ">=3.10"
dependencies = []
keywords = ["a-star", "ao-star", "n-queens", "graph-coloring", "bfs", "dfs", "tic-tac-toe", "search", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aialgos-ao-star = "aialgos.ao_star:main"
aialgos-a-star = "aialgos.a_star:main"
aialgos-n-queens = "aialgos.n_queens:main"
aialgos-graph-coloring = "aialgos.graph_coloring:main"
aialgos-traversal = "aialgos.traversal:main"
aialgos-tic-tac-toe = "aialgos.tic_tac_toe:main"

[tool.hatch.build.targets.wheel]
packages = ["aialgos"]

[tool.pytest.ini_options]
addopts = "-ra"
