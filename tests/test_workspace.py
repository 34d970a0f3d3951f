import pytest

from api.diagram_api.model import NetworkGraph
from core.diagram_platform import Workspace


@pytest.fixture
def workspace():
    graph = NetworkGraph()
    a = graph.add_node((0.0, 0.0))
    b = graph.add_node((50.0, 50.0))
    c = graph.add_node((200.0, 10.0))
    graph.add_node((300.0, 300.0))
    graph.add_edge(a, b)
    graph.add_curve(b, c, (120.0, 0.0))
    graph.add_edge(a, c)

    ws = Workspace()
    ws.set_graph(graph)
    return ws


def test_empty_workspace_queries():
    ws = Workspace()

    assert ws.has_graph() is False
    assert ws.list_nodes() == []
    assert ws.list_edges() == []
    assert ws.find_node_by_name("0") is None
    assert ws.find_isolated_nodes() == []
    assert ws.undo() is None


def test_undo_restores_previous_graph():
    first, second = NetworkGraph(), NetworkGraph()
    ws = Workspace()
    ws.set_graph(first)
    ws.set_graph(second)

    assert ws.history_size() == 1
    assert ws.undo() is first
    assert ws.get_graph() is first
    assert ws.history_size() == 0


def test_clear_drops_graph_and_history(workspace):
    workspace.set_graph(NetworkGraph())

    workspace.clear()

    assert workspace.get_graph() is None
    assert workspace.history_size() == 0


def test_find_node_by_name(workspace):
    assert workspace.find_node_by_name("2").position == (200.0, 10.0)


def test_find_nodes_in_region_any_corner_order(workspace):
    names = [n.name for n in workspace.find_nodes_in_region((60.0, 60.0), (0.0, 0.0))]

    assert names == ["0", "1"]


def test_find_isolated_nodes(workspace):
    assert [n.name for n in workspace.find_isolated_nodes()] == ["3"]


def test_find_nodes_by_degree(workspace):
    assert [n.name for n in workspace.find_nodes_by_degree(">=", 2)] == ["0", "1", "2"]
    assert [n.name for n in workspace.find_nodes_by_degree("==", 0)] == ["3"]


def test_find_nodes_by_degree_rejects_unknown_operator(workspace):
    with pytest.raises(ValueError, match="Unsupported operator"):
        workspace.find_nodes_by_degree("~", 1)


def test_find_curved_edges(workspace):
    curved = workspace.find_curved_edges()

    assert len(curved) == 1
    owner, conn = curved[0]
    assert (owner.name, conn.destination.name) == ("1", "2")
    assert conn.control == (120.0, 0.0)


def test_find_edges_touching(workspace):
    node = workspace.find_node_by_name("0")

    assert len(workspace.find_edges_touching(node)) == 2
    assert len(workspace.list_edges()) == 3


def test_history_keeps_only_most_recent_diagrams():
    graphs = [NetworkGraph() for _ in range(4)]
    ws = Workspace(history_limit=2)
    for graph in graphs:
        ws.set_graph(graph)

    assert ws.history_size() == 2
    assert ws.undo() is graphs[2]
    assert ws.undo() is graphs[1]
    assert ws.undo() is None
    assert ws.get_graph() is graphs[1]


def test_setting_current_graph_again_does_not_grow_history():
    graph = NetworkGraph()
    ws = Workspace()
    ws.set_graph(graph)

    ws.set_graph(graph)

    assert ws.history_size() == 0
