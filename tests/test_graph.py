import pytest

from algolab.graph import Graph, GraphError


@pytest.fixture
def graph():
    return Graph(0, 0)


def test_insert_node(graph):
    graph.insert_node(1, 10)
    graph.insert_node(2, 20)
    graph.insert_node(3, 5)
    graph.insert_node(4, -10)
    assert graph[1] == 10
    assert graph[2] == 20
    assert graph[3] == 5
    assert graph[4] == -10

    graph[1] = -5
    assert graph[1] == -5

    node = graph.insert_node(5, 123)
    assert node.id == 5
    assert node.value == 123

    with pytest.raises(GraphError):
        graph[6] = -5
    with pytest.raises(GraphError):
        graph.insert_node(4, 5)


def test_insert_edge(graph):
    for k in range(1, 5):
        graph.insert_node(k)
    graph.insert_edge(1, 2, 70)
    graph.insert_edge(2, 1, 7)
    graph.insert_edge(2, 3, 10)
    graph.insert_edge(2, 4, 10000)
    assert graph.out_edges(1)[0].value == 70
    assert graph.in_edges(1)[0].value == 7
    assert graph.out_edges(2)[0].value in (10, 10000, 7)
    assert sorted(e.value for e in graph.out_edges(2)) == [7, 10, 10000]

    graph.insert_node(5)
    edge = graph.insert_edge(1, 5, 123)
    assert edge.value == 123
    assert edge.nodes() == (1, 5)
    assert edge.source is graph.node(1)
    assert edge.target is graph.node(5)

    with pytest.raises(GraphError):
        graph.insert_edge(1, 2, 80)
    with pytest.raises(GraphError):
        graph.insert_edge(5, 6, 100)
    with pytest.raises(GraphError):
        graph.insert_edge(6, 5, 120)


def test_erase_edge(graph):
    graph.insert_node(1)
    graph.insert_node(2)
    graph.insert_edge(1, 2)
    graph.erase_edge(1, 2)
    assert graph.out_edges(1) == []

    graph.insert_node(3)
    graph.insert_node(4)
    graph.insert_node(5)
    graph.insert_edge(1, 3)
    graph.insert_edge(1, 4)
    graph.insert_edge(1, 5, 40)
    graph.erase_edge(1, 3)
    graph.erase_edge(1, 4)
    assert graph.out_edges(1)[0].value == 40
    graph.erase_edge(1, 5)
    assert graph.out_edges(1) == []

    edge = graph.insert_edge(1, 3, 50)
    assert graph.out_edges(1)[0].value == 50
    graph.erase_edge(*edge.nodes())
    assert graph.out_edges(1) == []
    assert graph.in_edges(3) == []

    with pytest.raises(GraphError):
        graph.erase_edge(77, 88)
    graph.insert_edge(1, 2, 400)
    graph.erase_edge(1, 2)
    with pytest.raises(GraphError):
        graph.erase_edge(1, 2)


def test_erase_node(graph):
    for k in range(1, 5):
        graph.insert_node(k)
    graph.insert_edge(2, 3)
    graph.insert_edge(2, 4)
    graph.insert_edge(2, 1)
    graph.insert_edge(4, 1)
    assert len(graph.out_edges(2)) == 3
    assert len(graph.in_edges(1)) == 2
    graph.erase_node(4)
    assert len(graph.out_edges(2)) == 2
    assert len(graph.in_edges(1)) == 1

    graph.erase_node(2)
    assert graph.out_edges(1) == []
    assert graph.in_edges(1) == []
    assert graph.out_edges(3) == []
    assert graph.in_edges(3) == []
    assert graph.edges() == []
    graph.erase_node(1)
    graph.erase_node(3)
    assert graph.is_empty()
    with pytest.raises(GraphError):
        graph.erase_node(2)


def test_gets(graph):
    graph.insert_node(1)
    assert len(graph.nodes()) == 1
    graph.insert_node(2, -30000000)
    assert len(graph.nodes()) == 2
    graph.insert_node(3)
    assert len(graph.nodes()) == 3
    graph.insert_node(4)
    assert len(graph.nodes()) == 4

    graph.insert_edge(2, 3, 1000)
    graph.insert_edge(2, 4, 2000)
    assert len(graph.out_nodes(2)) == 2
    assert len(graph.out_edges(2)) == 2
    assert len(graph.out_nodes(4)) == 0
    assert len(graph.out_edges(4)) == 0
    assert graph.in_nodes(4)[0].id == 2
    assert graph.in_nodes(4)[0].value == -30000000
    assert graph.in_edges(4)[0].nodes()[0] == 2
    assert graph.in_edges(4)[0].value == 2000
    assert len(graph.in_nodes(2)) == 0
    assert len(graph.in_edges(2)) == 0

    with pytest.raises(GraphError):
        graph.in_edges(5)
    with pytest.raises(GraphError):
        graph.in_nodes(6)
    with pytest.raises(GraphError):
        graph.out_edges(7)
    with pytest.raises(GraphError):
        graph.out_nodes(8)


def test_bi_edge_and_edge_lookup(graph):
    graph.insert_node(1)
    graph.insert_node(2)
    graph.insert_bi_edge(1, 2, 7)
    assert graph.edge(1, 2).value == 7
    assert graph.edge(2, 1).value == 7
    assert [e.nodes() for e in graph.edges()] == [(1, 2), (2, 1)]
    with pytest.raises(GraphError):
        graph.edge(3, 1)


def test_defaults_and_container_protocol(graph):
    graph.insert_node(1)
    graph.insert_node(2)
    edge = graph.insert_edge(1, 2)
    assert graph[1] == 0
    assert edge.value == 0
    assert 1 in graph and 3 not in graph
    assert len(graph) == 2
    assert list(graph) == [1, 2]
    graph.clear()
    assert graph.is_empty()
    assert len(graph) == 0


def test_copy_is_independent(graph):
    graph.insert_node(1, 10)
    graph.insert_node(2, 20)
    graph.insert_edge(1, 2, 70)
    other = graph.copy()
    assert other[1] == 10
    assert other.edge(1, 2).value == 70
    other[1] = -5
    other.erase_edge(1, 2)
    assert graph[1] == 10
    assert graph.edge(1, 2).value == 70
    assert other.out_edges(1) == []