"""Classic AI search and constraint algorithms: A*, AO*, N-queens, graph colouring, BFS/DFS and tic-tac-toe."""

__version__ = "0.1.0"