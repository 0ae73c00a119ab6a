import logging
from pathlib import Path

from route_planner.errors import InputFileError
from route_planner.graph import RoadGraph

logger = logging.getLogger(__name__)


def parse_edge_line(line):
    """
    "<source> <destination> <weight>" -> (source, destination, weight).
    Returns None for lines with fewer than three fields, a non-integer
    weight or a negative weight. Extra fields are ignored.
    """
    fields = line.split()
    if len(fields) < 3:
        return None
    source, destination, raw_weight = fields[:3]
    # plain ASCII digits only, no sign, no "1_000"
    if not (raw_weight.isascii() and raw_weight.isdigit()):
        return None
    return source, destination, int(raw_weight)


def parse_query_line(line):
    fields = line.split()
    if len(fields) < 2:
        return None
    return fields[0], fields[1]


def _iter_parsed(lines, parser, kind):
    for lineno, line in enumerate(lines, 1):
        parsed = parser(line)
        if parsed is None:
            if line.strip():
                logger.debug("Skipping malformed %s line %d: %r", kind, lineno, line.rstrip("\n"))
            continue
        yield parsed


def iter_edges(lines):
    return _iter_parsed(lines, parse_edge_line, "edge")


def iter_queries(lines):
    return _iter_parsed(lines, parse_query_line, "query")


def _open(path):
    try:
        # undecodable bytes become U+FFFD, the line still parses or gets skipped
        return open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise InputFileError(path, e.strerror) from e


def load_graph(path):
    path = Path(path)
    with _open(path) as f:
        graph = RoadGraph.from_edges(iter_edges(f))
    logger.info("Loaded road graph from %s: %d nodes, %d edges",
                path, len(graph), graph.edge_count())
    return graph


def load_queries(path):
    path = Path(path)
    with _open(path) as f:
        queries = list(iter_queries(f))
    logger.info("Loaded %d route queries from %s", len(queries), path)
    return queries
