from typing import NamedTuple


class Leg(NamedTuple):
    """One edge of a resolved route."""
    source: str
    destination: str
    distance: int


def route_nodes(distances, source, destination):
    """
    Walk predecessor links back from destination.
    Returns the node list source -> destination, or [] if the walk
    does not end at source (destination unreached).
    """
    record = distances.get(destination)
    if record is None or not record.reached:
        return []

    path = []
    node = destination
    seen = set()
    while node is not None and node not in seen:
        seen.add(node)
        path.append(node)
        node = distances[node].predecessor
    path.reverse()

    if not path or path[0] != source:
        return []
    return path


def reconstruct(distances, source, destination):
    """
    Ordered legs of the shortest route, using the edge weight committed
    during relaxation so parallel edges report the one actually taken.
    Empty when origin == destination or destination is unreached.
    """
    path = route_nodes(distances, source, destination)
    if len(path) < 2:
        return []

    return [
        Leg(u, v, distances[v].leg_weight)
        for u, v in zip(path[:-1], path[1:])
    ]
