"""
Query Batch Resolver
====================
Resolves (origin, destination) queries against a read-only RoadGraph.
Shortest-path trees are computed once per distinct origin and reused for
every query of the batch.
"""

import enum
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Tuple

from route_planner.pathfinding.dijkstra import shortest_paths
from route_planner.pathfinding.reconstruct import Leg, reconstruct

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    RESOLVED = "resolved"
    UNREACHABLE = "unreachable"      # both nodes known, no path
    UNKNOWN_NODE = "unknown_node"    # a node never appears in the road data


@dataclass(frozen=True)
class RouteResult:
    """Result record for one query."""
    origin: str
    destination: str
    outcome: Outcome
    legs: Tuple[Leg, ...] = ()
    total_distance: Optional[int] = None

    @property
    def resolved(self) -> bool:
        return self.outcome is Outcome.RESOLVED


class RouteResolver:
    """
    Resolves queries against one graph, caching shortest-path trees by origin.
    The graph must not change while a resolver is in use.
    """

    def __init__(self, graph, engine=shortest_paths):
        self.graph = graph
        self._engine = engine
        self._trees = {}

    def distances_from(self, origin):
        tree = self._trees.get(origin)
        if tree is None:
            logger.debug("Computing shortest paths from %s", origin)
            tree = self._engine(self.graph, origin)
            self._trees[origin] = tree
        else:
            logger.debug("Reusing shortest paths from %s", origin)
        return tree

    def resolve_one(self, origin, destination) -> RouteResult:
        if not (self.graph.has_node(origin) and self.graph.has_node(destination)):
            return RouteResult(origin, destination, Outcome.UNKNOWN_NODE)

        distances = self.distances_from(origin)
        record = distances[destination]
        if not record.reached:
            return RouteResult(origin, destination, Outcome.UNREACHABLE)

        legs = tuple(reconstruct(distances, origin, destination))
        return RouteResult(origin, destination, Outcome.RESOLVED, legs, record.distance)

    def iter_resolve(self, queries):
        for origin, destination in queries:
            yield self.resolve_one(origin, destination)

    def resolve(self, queries):
        results = list(self.iter_resolve(queries))
        counts = Counter(result.outcome for result in results)
        logger.info(
            "Resolved %d queries: %d resolved, %d unreachable, %d unknown node",
            len(results),
            counts[Outcome.RESOLVED],
            counts[Outcome.UNREACHABLE],
            counts[Outcome.UNKNOWN_NODE],
        )
        return results


def resolve(graph, queries):
    """Resolve a batch of (origin, destination) queries, keeping input order."""
    return RouteResolver(graph).resolve(queries)