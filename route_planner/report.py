import json
import logging
import os
from pathlib import Path

import pandas as pd

from route_planner import config
from route_planner.resolver import Outcome

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["origin", "destination", "outcome", "total_distance", "route", "legs"]


def format_result(result):
    """
    Text block for one RouteResult, blank line included:
        Trasa: A --> C (8 km):
        A --> B 5 km
        B --> C 3 km
    """
    header = config.ROUTE_HEADER.format(origin=result.origin, destination=result.destination)

    if result.outcome is Outcome.UNKNOWN_NODE:
        return f"{header} ({config.LABEL_UNKNOWN_NODE})\n\n"
    if result.outcome is Outcome.UNREACHABLE:
        return f"{header} ({config.LABEL_UNREACHABLE})\n\n"

    lines = [f"{header} ({result.total_distance} {config.DISTANCE_UNIT}):"]
    for leg in result.legs:
        lines.append(f"{leg.source} --> {leg.destination} {leg.distance} {config.DISTANCE_UNIT}")
    return "\n".join(lines) + "\n\n"


def format_results(results):
    return "".join(format_result(r) for r in results)


def format_graph(graph):
    """Console dump of the graph: every node, then its numbered connections."""
    blocks = []
    for node in graph.nodes():
        lines = [config.GRAPH_NODE_LINE.format(node=node)]
        for index, (destination, weight) in enumerate(sorted(graph.edges_from(node)), 1):
            lines.append(config.GRAPH_EDGE_LINE.format(index=index, destination=destination, weight=weight))
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def display_graph(graph):
    print(format_graph(graph), end="")


def _route_string(result):
    if not result.resolved:
        return ""
    nodes = [result.origin] + [leg.destination for leg in result.legs]
    return " -> ".join(nodes)


def results_to_records(results):
    records = []
    for r in results:
        records.append({
            "origin": r.origin,
            "destination": r.destination,
            "outcome": r.outcome.value,
            "total_distance": r.total_distance,
            "route": _route_string(r),
            "legs": [
                {"from": leg.source, "to": leg.destination, "distance": leg.distance}
                for leg in r.legs
            ],
        })
    return records


def results_to_frame(results):
    """One row per query; legs flattened to "A:B:5;B:C:3"."""
    records = results_to_records(results)
    df = pd.DataFrame(records, columns=FRAME_COLUMNS)
    df["total_distance"] = pd.array([rec["total_distance"] for rec in records], dtype="Int64")
    df["legs"] = [
        ";".join(f"{leg['from']}:{leg['to']}:{leg['distance']}" for leg in rec["legs"])
        for rec in records
    ]
    return df


def write_results(results, path, fmt="text"):
    path = Path(path)
    os.makedirs(path.parent, exist_ok=True)

    if fmt == "text":
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_results(results))
    elif fmt == "csv":
        results_to_frame(results).to_csv(path, index=False)
    elif fmt == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(results_to_records(results), f, indent=4, ensure_ascii=False)
    else:
        raise ValueError(f"Unknown output format: {fmt}")

    logger.info("Wrote %d route results to %s (%s)", len(results), path, fmt)
    return path
