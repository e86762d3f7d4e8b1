import pytest

from aialgos.graph_coloring import (
    EXAMPLE_COLORS,
    EXAMPLE_EDGES,
    EXAMPLE_VERTICES,
    MAX_VERTICES,
    color_graph,
    format_colors,
    main,
)


def test_example_colouring():
    colors = color_graph(EXAMPLE_VERTICES, EXAMPLE_EDGES, EXAMPLE_COLORS)
    assert colors == [1, 2, 3, 1]


def test_example_colouring_is_proper():
    colors = color_graph(EXAMPLE_VERTICES, EXAMPLE_EDGES, EXAMPLE_COLORS)
    assert len(colors) == EXAMPLE_VERTICES
    assert set(colors) <= set(range(1, EXAMPLE_COLORS + 1))
    clashes = [(u, v) for u, v in EXAMPLE_EDGES if colors[u] == colors[v]]
    assert clashes == []


def test_triangle_needs_three_colours():
    triangle = [(0, 1), (1, 2), (0, 2)]
    assert color_graph(3, triangle, 2) is None
    colors = color_graph(3, triangle, 3)
    assert sorted(colors) == [1, 2, 3]


def test_no_colours_means_no_solution():
    assert color_graph(2, [], 0) is None


def test_empty_graph():
    assert color_graph(0, [], 3) == []


def test_isolated_vertices_all_get_first_colour():
    assert color_graph(4, [], 2) == [1, 1, 1, 1]


@pytest.mark.parametrize("n", [2, 5, 8])
def test_cycle_colouring_is_proper(n):
    edges = [(i, (i + 1) % n) for i in range(n)]
    colors = color_graph(n, edges, 3)
    assert len(colors) == n
    assert set(colors) <= {1, 2, 3}
    clashes = [(u, v) for u, v in edges if colors[u] == colors[v]]
    assert clashes == []


def test_edge_to_unknown_vertex_raises():
    with pytest.raises(ValueError):
        color_graph(3, [(0, 3)], 2)


def test_too_many_vertices_raises():
    with pytest.raises(ValueError):
        color_graph(MAX_VERTICES + 1, [], 2)


def test_format_colors():
    assert format_colors([1, 2]) == "Vertex 0 ---> Color 1\nVertex 1 ---> Color 2"


def test_main_prints_failure(capsys):
    assert main(["--colors", "2"]) == 0
    assert capsys.readouterr().out == "Solution does not exist.\n"


def test_main_prints_colouring(capsys):
    main([])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == EXAMPLE_VERTICES
    assert out[0].startswith("Vertex 0 ---> Color ")