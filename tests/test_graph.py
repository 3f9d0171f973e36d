import pytest

from corosch.graph import Edge, Graph, Node


def _names(graph):
    return [node.name for node in graph.nodes]


def test_node_defaults():
    node = Node()
    assert node.name == ""
    assert node.fanins == [] and node.fanouts == []
    assert node.task is None


def test_insert_node_keeps_order():
    graph = Graph()
    a = graph.insert_node("a")
    b = graph.insert_node("b")
    assert graph.nodes == [a, b]
    assert _names(graph) == ["a", "b"]


def test_insert_edge_links_nodes():
    graph = Graph()
    a = graph.insert_node("a")
    b = graph.insert_node("b")
    edge = graph.insert_edge(a, b)
    assert isinstance(edge, Edge)
    assert edge.from_node is a and edge.to_node is b
    assert a.fanouts == [edge] and b.fanins == [edge]
    assert a.fanins == [] and b.fanouts == []
    assert graph.edges == [edge]


def test_from_file_parses_nodes_and_edges(tmp_path):
    path = tmp_path / "circuit.txt"
    path.write_text('3\n"a";\n"b";\n"c";\n"a" -> "b";\n"b" -> "c";\n')
    graph = Graph.from_file(path)
    assert _names(graph) == ["a", "b", "c"]
    pairs = [(e.from_node.name, e.to_node.name) for e in graph.edges]
    assert pairs == [("a", "b"), ("b", "c")]
    b = graph.nodes[1]
    assert len(b.fanins) == 1 and len(b.fanouts) == 1


def test_from_file_ignores_incomplete_edge(tmp_path):
    path = tmp_path / "circuit.txt"
    path.write_text('2\n"x";\n"y";\n"x" -> "y";\n"y" ->\n')
    graph = Graph.from_file(str(path))
    assert [(e.from_node.name, e.to_node.name) for e in graph.edges] == [("x", "y")]


def test_from_file_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Graph.from_file(tmp_path / "absent.txt")


def test_from_file_unknown_node(tmp_path):
    path = tmp_path / "circuit.txt"
    path.write_text('1\n"a";\n"a" -> "z";\n')
    with pytest.raises(ValueError):
        Graph.from_file(path)


def test_from_file_bad_count(tmp_path):
    path = tmp_path / "circuit.txt"
    path.write_text('many\n"a";\n')
    with pytest.raises(ValueError):
        Graph.from_file(path)


def test_from_file_too_few_nodes(tmp_path):
    path = tmp_path / "circuit.txt"
    path.write_text('4\n"a";\n')
    with pytest.raises(ValueError):
        Graph.from_file(path)