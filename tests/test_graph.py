from route_planner.graph import RoadGraph


def test_destination_only_node_exists_without_edges():
    g = RoadGraph()
    g.add_edge('A', 'B', 5)
    assert g.has_node('B')
    assert 'B' in g
    assert g.edges_from('B') == set()


def test_unknown_node_has_no_edges():
    g = RoadGraph.from_edges([('A', 'B', 5)])
    assert not g.has_node('Z')
    assert g.edges_from('Z') == set()


def test_duplicate_edge_absorbed_but_other_weight_kept():
    g = RoadGraph.from_edges([('A', 'B', 5), ('A', 'B', 5), ('A', 'B', 9)])
    assert g.edges_from('A') == {('B', 5), ('B', 9)}
    assert g.edge_count() == 2
    assert len(g) == 2


def test_edges_from_returns_a_copy():
    g = RoadGraph.from_edges([('A', 'B', 5)])
    g.edges_from('A').add(('C', 1))
    assert g.edges_from('A') == {('B', 5)}
    assert not g.has_node('C')


def test_to_networkx_keeps_parallel_edges():
    g = RoadGraph.from_edges([('A', 'B', 5), ('A', 'B', 9), ('B', 'C', 1)])
    G = g.to_networkx()
    assert sorted(G.nodes()) == ['A', 'B', 'C']
    assert G.number_of_edges('A', 'B') == 2
    assert sorted(d['weight'] for d in G.get_edge_data('A', 'B').values()) == [5, 9]
