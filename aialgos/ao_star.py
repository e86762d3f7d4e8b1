"""AO* search over AND/OR graphs whose nodes are small integers labelled A, B, C, ..."""

from __future__ import annotations

from dataclasses import dataclass

MAX_NODES = 10
MAX_GROUPS = 10
INF = 9999
DEFAULT_HEURISTIC = 999


@dataclass(frozen=True)
class _Group:
    cost: int
    children: tuple[int, ...]


def _label(node: int) -> str:
    return chr(ord("A") + node)


def _check_node(node: int) -> None:
    if not 0 <= node < MAX_NODES:
        raise ValueError(f"node {node} is outside 0..{MAX_NODES - 1}")


class AndOrGraph:
    """An AND/OR graph: every node has OR-alternatives, each an AND-set of children with a cost."""

    def __init__(self) -> None:
        self._groups: dict[int, list[_Group]] = {}
        self._solved: set[int] = set()
        self._choice: dict[int, int] = {}
        self.heuristics: dict[int, int] = {
            node: DEFAULT_HEURISTIC for node in range(MAX_NODES)
        }

    def add_group(self, node: int, cost: int, children) -> int:
        """Add an AND-set of children reachable from node at the given cost; return its index."""
        _check_node(node)
        members = tuple(children)
        if not members:
            raise ValueError("a group needs at least one child")
        for child in members:
            _check_node(child)
        groups = self._groups.setdefault(node, [])
        if len(groups) >= MAX_GROUPS:
            raise ValueError(f"node {_label(node)} already has {MAX_GROUPS} groups")
        groups.append(_Group(cost, members))
        return len(groups) - 1

    def set_terminal(self, node: int, heuristic: int) -> None:
        """Mark node as already solved with the given heuristic value."""
        _check_node(node)
        self.heuristics[node] = heuristic
        self._solved.add(node)

    def best_group(self, node: int) -> tuple[int, int]:
        """Return (group index, estimated cost) of the cheapest alternative of node."""
        _check_node(node)
        best_index, best_total = -1, INF
        for index, group in enumerate(self._groups.get(node, ())):
            total = sum(self.heuristics[child] for child in group.children) + group.cost
            if total < best_total:
                best_index, best_total = index, total
        if best_index < 0:
            raise ValueError(f"node {_label(node)} has no usable group")
        return best_index, best_total

    def solve(self, root: int) -> None:
        """Run one AO* pass from root, revising heuristics and marking solved nodes."""
        _check_node(root)
        if root in self._solved:
            return
        index, total = self.best_group(root)
        self.heuristics[root] = total
        solvable = True
        for child in self._groups[root][index].children:
            if child not in self._solved:
                solvable = False
                self.solve(child)
        if solvable:
            self._solved.add(root)
            self._choice[root] = index

    def solution_lines(self, root: int) -> list[str]:
        """Return the lines describing the solved subgraph below root."""
        _check_node(root)
        if root not in self._solved:
            return []
        index = self._choice.get(root)
        if index is None:
            return [_label(root)]
        children = self._groups[root][index].children
        names = " + ".join(_label(child) for child in children)
        if len(children) > 1:
            line = f"{_label(root)} -> ({names})"
        else:
            line = f"{_label(root)}{names}"
        lines = [line]
        for child in children:
            lines.extend(self.solution_lines(child))
        return lines


def example_graph() -> AndOrGraph:
    """Build the sample graph: A -> (B + C)[3] or D[2]; B -> E[2]; C -> F[4]."""
    graph = AndOrGraph()
    graph.add_group(0, 3, (1, 2))
    graph.add_group(0, 2, (3,))
    graph.add_group(1, 2, (4,))
    graph.add_group(2, 4, (5,))
    graph.set_terminal(4, 0)
    graph.set_terminal(5, 0)
    graph.set_terminal(3, 0)
    return graph


def main(argv=None) -> int:
    graph = example_graph()
    graph.solve(0)
    print("Solution Path:")
    for line in graph.solution_lines(0):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())