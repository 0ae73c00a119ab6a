import logging
import networkx as nx

logger = logging.getLogger(__name__)


class RoadGraph:
    """
    Directed road network:
    - Each node maps to a set of outgoing (destination, weight) edges.
    - A destination always exists as a node, even with no outgoing edges.
    - An identical (destination, weight) edge is absorbed, a different weight
      to the same destination is kept as a separate edge.
    """

    def __init__(self):
        self._adjacency = {}

    @classmethod
    def from_edges(cls, edges):
        graph = cls()
        for source, destination, weight in edges:
            graph.add_edge(source, destination, weight)
        return graph

    def add_node(self, node):
        self._adjacency.setdefault(node, set())

    def add_edge(self, source, destination, weight):
        self._adjacency.setdefault(source, set()).add((destination, int(weight)))
        self._adjacency.setdefault(destination, set())

    def has_node(self, node):
        return node in self._adjacency

    def edges_from(self, node):
        # copy so callers can't mutate the graph through the result
        return set(self._adjacency.get(node, ()))

    def nodes(self):
        return sorted(self._adjacency)

    def edge_count(self):
        return sum(len(edges) for edges in self._adjacency.values())

    def __contains__(self, node):
        return self.has_node(node)

    def __getitem__(self, node):
        return self._adjacency[node]

    def __iter__(self):
        return iter(self._adjacency)

    def __len__(self):
        return len(self._adjacency)

    def __repr__(self):
        return f"RoadGraph(nodes={len(self)}, edges={self.edge_count()})"

    def to_networkx(self):
        """
        Convert to a networkx MultiDiGraph (parallel edges with different
        weights survive as separate keys).
        """
        G = nx.MultiDiGraph()
        G.add_nodes_from(self.nodes())
        for source in self.nodes():
            for destination, weight in sorted(self._adjacency[source]):
                G.add_edge(source, destination, weight=weight)
        logger.debug("Converted %r to networkx", self)
        return G
