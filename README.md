# aialgos

Small implementations of classic AI search and constraint algorithms.
Each module can be used as a library and also has a command-line demo
that runs a built-in example.

## Contents

| Module | What it does |
| --- | --- |
| `aialgos.a_star` | A* search on a grid, four-way moves, Manhattan heuristic |
| `aialgos.ao_star` | AO* search over an AND/OR graph (`AndOrGraph`) |
| `aialgos.n_queens` | Backtracking solver for the N-queens puzzle |
| `aialgos.graph_coloring` | Backtracking m-colouring of an undirected graph |
| `aialgos.traversal` | Breadth-first and depth-first traversal of an `UndirectedGraph` |
| `aialgos.tic_tac_toe` | Two-player tic-tac-toe on the console (`TicTacToe`, `play`) |

No third-party libraries are needed.

## Installation

```
pip install .
```

## Library use

```python
from aialgos.a_star import a_star_search, format_path, manhattan
from aialgos.n_queens import solve_n_queens, render_board
from aialgos.graph_coloring import color_graph, format_colors
from aialgos.traversal import UndirectedGraph, bfs, dfs
from aialgos.ao_star import AndOrGraph, example_graph

# A*: 0 is a free cell, anything else is blocked.
grid = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0],
]
path = a_star_search(grid, (0, 0), (4, 4))   # list of (row, col), or None
print(format_path(path))                     # "Path: (4,4) <- ... <- (0,0)"

# N-queens: column of the queen in each row, or None.
print(render_board(solve_n_queens(8)))

# Graph colouring: colours 1..m per vertex, or None.
print(format_colors(color_graph(4, [(0, 1), (0, 2), (1, 2), (1, 3), (2, 3)], 3)))

# Traversal: neighbours are visited most recently added first.
g = UndirectedGraph(5)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4)]:
    g.add_edge(u, v)
print(bfs(g, 0), dfs(g, 0))

# AO*: nodes are 0..9 and are printed as letters A..J.
graph = example_graph()
graph.solve(0)
print("\n".join(graph.solution_lines(0)))
```

Errors are raised as `ValueError`: a blocked or off-grid start or
destination for `a_star_search`, an unknown vertex or node, a negative
board size, or an AO* node with no alternatives to choose from.

### AND/OR graphs

`AndOrGraph.add_group(node, cost, children)` adds one alternative to a
node: an AND-set of children reached at the given cost. `set_terminal`
marks a node solved with a fixed heuristic value; all other nodes start
with a heuristic of 999. `best_group(node)` returns the index and
estimated cost of the cheapest alternative, `solve(root)` runs an AO*
pass, and `solution_lines(root)` describes the solved subgraph.

### Tic-tac-toe

`TicTacToe` holds the board, the current marker and player number;
`place_marker(slot)` fills slot 1–9 if it is free, `check_winner()`
returns the current player's number when a line is complete, `swap()`
passes the turn. `play(read, write)` runs a whole game through the given
input and output callables and returns the winner, or 0 for a draw.

## Commands

```
aialgos-a-star [--start ROW COL] [--dest ROW COL]
aialgos-ao-star
aialgos-n-queens [N]
aialgos-graph-coloring [--colors M]
aialgos-traversal [bfs|dfs] [--start VERTEX]
aialgos-tic-tac-toe
```

`aialgos-a-star` searches the 5×5 grid shown above (defaults `0 0` to
`4 4`). `aialgos-ao-star` solves the sample graph
A → (B + C) at cost 3 or D at cost 2; B → E at 2; C → F at 4.
`aialgos-n-queens` solves an 8×8 board unless given another size.
`aialgos-graph-coloring` colours the sample 4-vertex graph with 3
colours unless told otherwise. `aialgos-traversal` walks the sample
5-vertex graph breadth-first (default) or depth-first.
`aialgos-tic-tac-toe` is interactive: player 1 picks a marker, then the
players take turns entering a slot from 1 to 9.

## What it does not do

The commands run only their built-in examples, apart from the options
listed above; there is no way to load a grid, graph or AND/OR graph
from a file. Tic-tac-toe is for two human players: there is no
computer opponent.

## Tests

```
pip install .[test]
pytest
```