import pytest

from route_planner.errors import GraphConsistencyError
from route_planner.graph import RoadGraph
from route_planner.pathfinding.dijkstra import shortest_paths
from route_planner.pathfinding.reconstruct import Leg
from route_planner.report import format_results
from route_planner.resolver import Outcome, RouteResolver, RouteResult, resolve


@pytest.fixture
def abc_graph():
    return RoadGraph.from_edges([('A', 'B', 5), ('B', 'C', 3), ('A', 'C', 10)])


class CountingEngine:
    def __init__(self):
        self.calls = []

    def __call__(self, graph, source):
        self.calls.append(source)
        return shortest_paths(graph, source)


def test_resolved_scenario(abc_graph):
    [result] = resolve(abc_graph, [('A', 'C')])
    assert result == RouteResult(
        'A', 'C', Outcome.RESOLVED, (Leg('A', 'B', 5), Leg('B', 'C', 3)), 8
    )
    assert result.resolved


def test_unreachable_scenario():
    g = RoadGraph.from_edges([('A', 'B', 5)])
    [result] = resolve(g, [('B', 'A')])
    assert result.outcome is Outcome.UNREACHABLE
    assert result.legs == ()
    assert result.total_distance is None


@pytest.mark.parametrize("query", [('Z', 'A'), ('A', 'Z'), ('Z', 'Y')])
def test_unknown_node_scenario(abc_graph, query):
    [result] = resolve(abc_graph, [query])
    assert result.outcome is Outcome.UNKNOWN_NODE


def test_unknown_nodes_never_run_the_engine(abc_graph):
    engine = CountingEngine()
    results = RouteResolver(abc_graph, engine=engine).resolve([('Z', 'A'), ('A', 'Z')])
    assert [r.outcome for r in results] == [Outcome.UNKNOWN_NODE] * 2
    assert engine.calls == []


def test_origin_equals_destination(abc_graph):
    [result] = resolve(abc_graph, [('B', 'B')])
    assert result.outcome is Outcome.RESOLVED
    assert result.total_distance == 0
    assert result.legs == ()


def test_destination_only_node_is_queryable(abc_graph):
    [result] = resolve(abc_graph, [('C', 'C')])
    assert result.resolved
    [result] = resolve(abc_graph, [('C', 'A')])
    assert result.outcome is Outcome.UNREACHABLE


def test_engine_runs_once_per_origin(abc_graph):
    engine = CountingEngine()
    queries = [('A', 'C'), ('B', 'C'), ('A', 'B'), ('A', 'C'), ('B', 'A')]
    results = RouteResolver(abc_graph, engine=engine).resolve(queries)
    assert engine.calls == ['A', 'B']
    assert [(r.origin, r.destination) for r in results] == queries


def test_iter_resolve_is_lazy(abc_graph):
    engine = CountingEngine()
    resolver = RouteResolver(abc_graph, engine=engine)
    results = resolver.iter_resolve([('A', 'C'), ('B', 'C')])
    assert engine.calls == []
    next(results)
    assert engine.calls == ['A']


def test_consistency_failure_aborts_batch():
    class BrokenGraph(RoadGraph):
        def __getitem__(self, node):
            return {('ghost', 1)}

    g = BrokenGraph.from_edges([('A', 'B', 1)])
    with pytest.raises(GraphConsistencyError):
        resolve(g, [('Z', 'A'), ('A', 'B')])


def test_same_batch_twice_gives_identical_output():
    edges = [('A', 'B', 2), ('A', 'C', 2), ('B', 'D', 2), ('C', 'D', 2), ('D', 'E', 1)]
    queries = [('A', 'E'), ('E', 'A'), ('A', 'Q'), ('C', 'E')]
    first = format_results(resolve(RoadGraph.from_edges(edges), queries))
    second = format_results(resolve(RoadGraph.from_edges(reversed(edges)), queries))
    assert first == second
    assert "A --> B 2 km" in first
