import heapq
import logging
import math
from typing import NamedTuple, Optional

from route_planner.errors import GraphConsistencyError

logger = logging.getLogger(__name__)

INFINITY = math.inf  # distance of a node the run never reached


class DistanceRecord(NamedTuple):
    distance: float
    predecessor: Optional[str] = None
    leg_weight: Optional[int] = None  # weight of the edge predecessor -> node

    @property
    def reached(self):
        return self.distance != INFINITY


def shortest_paths(graph, source):
    """
    Single-source Dijkstra.
    `graph` is a RoadGraph or any mapping node -> iterable of (neighbor, weight).
    Returns {node: DistanceRecord} for every node of the graph.
    Ties on distance are broken by node id so repeated runs give the same tree.
    """
    records = {node: DistanceRecord(INFINITY) for node in graph}
    records[source] = DistanceRecord(0)

    if source not in graph:
        logger.warning("Source %r is not a node of the graph, nothing is reachable", source)
        return records

    # initialize min heap
    pq = [(0, source)]  # (distance, node)

    while pq:
        current_dist, node = heapq.heappop(pq)

        if node not in graph:
            raise GraphConsistencyError(
                f"Node {node!r} reached from {source!r} has no entry in the graph"
            )

        # skip outdated elements
        if current_dist > records[node].distance:
            continue

        for neighbor, weight in sorted(graph[node]):
            neighbor_record = records.get(neighbor)
            if neighbor_record is None:
                raise GraphConsistencyError(
                    f"Edge {node!r} -> {neighbor!r} points outside the graph"
                )
            new_dist = current_dist + weight
            if new_dist < neighbor_record.distance:  # dv > du + w
                records[neighbor] = DistanceRecord(new_dist, node, weight)
                heapq.heappush(pq, (new_dist, neighbor))

    return records
