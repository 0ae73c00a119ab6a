import logging
import os
import re

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.patches import Patch

logger = logging.getLogger(__name__)

ROUTE_COLOR = "red"
NODE_COLORS = {
    "origin": "#B0E57C",
    "destination": "#FFDD57",
    "route": "#FF6F61",
    "other": "#A0CBE2",
}


def drawing_graph(graph):
    """
    Collapse the road graph to a DiGraph for drawing. Parallel edges between
    the same pair end up in one label, e.g. "5/7".
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.nodes())
    for u, v, data in graph.to_networkx().edges(data=True):
        weight = data["weight"]
        if G.has_edge(u, v):
            G[u][v]["weights"].append(weight)
        else:
            G.add_edge(u, v, weights=[weight])
    for u, v, data in G.edges(data=True):
        data["label"] = "/".join(str(w) for w in sorted(data["weights"]))
    return G


def _safe_name(node):
    # node ids are free text, keep them inside plot_dir
    return re.sub(r"[^\w.-]", "_", str(node))


def route_filename(result, index=None):
    stem = f"route_{_safe_name(result.origin)}_{_safe_name(result.destination)}"
    if index is not None:
        stem = f"{index:03d}_{stem}"
    return f"{stem}.png"


def draw_graph_with_route(graph, result, output_path, layout="spring"):
    """Save a PNG of the road graph with the result's route highlighted."""
    G = drawing_graph(graph)

    if layout == "kamada":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        pos = nx.spring_layout(G, seed=42, k=2.0)

    route = []
    if result.resolved:
        route = [result.origin] + [leg.destination for leg in result.legs]

    def role(n):
        if n == result.origin:
            return "origin"
        if n == result.destination:
            return "destination"
        if n in route:
            return "route"
        return "other"

    plt.figure(figsize=(10, 8))
    try:
        nx.draw_networkx_nodes(G, pos, node_color=[NODE_COLORS[role(n)] for n in G.nodes()], node_size=500)
        nx.draw_networkx_labels(G, pos, font_size=9)
        nx.draw_networkx_edges(G, pos, arrows=True, arrowstyle='->', width=1.0, arrowsize=12)
        edge_labels = nx.get_edge_attributes(G, 'label')
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=8)

        if len(route) > 1:
            route_edges = [(leg.source, leg.destination) for leg in result.legs]
            nx.draw_networkx_edges(
                G, pos, edgelist=route_edges,
                width=3.0, edge_color=ROUTE_COLOR,
                arrows=True, arrowstyle='->', arrowsize=16
            )
            nx.draw_networkx_edge_labels(
                G, pos,
                edge_labels={(leg.source, leg.destination): str(leg.distance) for leg in result.legs},
                font_color=ROUTE_COLOR,
                font_size=10,
                bbox=dict(facecolor='white', edgecolor='none', alpha=0.8)
            )

        legend_elements = [
            Patch(facecolor=color, label=name.capitalize())
            for name, color in NODE_COLORS.items()
        ]
        plt.legend(handles=legend_elements, loc='upper left', frameon=True)

        if result.resolved:
            title = f"{result.origin} --> {result.destination} ({result.total_distance} km)"
        else:
            title = f"{result.origin} --> {result.destination} (no route)"
        plt.title(title, fontsize=12)
        plt.tight_layout()
        directory = os.path.dirname(str(output_path))
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(output_path)
    finally:
        plt.close()
    logger.info("Saved route plot %s", output_path)
    return output_path


def plot_results(graph, results, plot_dir):
    """One image per resolved result. Returns the written paths."""
    written = []
    for index, result in enumerate(results, 1):
        if not result.resolved:
            continue
        path = os.path.join(str(plot_dir), route_filename(result, index))
        written.append(draw_graph_with_route(graph, result, path))
    return written
