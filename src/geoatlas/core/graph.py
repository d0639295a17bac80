"""
Asset graph container backed by rustworkx.

Holds the output of a graph build: typed nodes, undirected links, and the
id <-> index bimap used for neighbourhood queries. Renderers receive
``nodes``/``links`` and treat every rebuild as a full replacement.
"""

from collections import defaultdict
from typing import Any, Dict, Iterator, List, Optional, Set

import rustworkx as rx

from .exceptions import InvalidArgumentError
from .types import GraphEdge, GraphNode, NodeType


class AssetGraph:
    """
    Undirected multigraph of hubs and assets.

    Features:
    - O(1) node lookup via ID-to-Index bimap
    - Insertion-ordered node and link lists
    - One-hop neighbourhood queries for highlight-on-hover
    """

    def __init__(self, mode: str = "", replace_nodes: bool = True):
        self.mode = mode
        self.replace_nodes = replace_nodes
        self._graph = rx.PyGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._nodes_by_type: Dict[NodeType, List[str]] = defaultdict(list)

    def add_node(self, node: GraphNode) -> None:
        """
        Add a node, replacing any node with the same id.

        Raises:
            InvalidArgumentError: If the id is taken and the graph was
                created with ``replace_nodes=False``.
        """
        if node.id in self._id_to_idx:
            if not self.replace_nodes:
                raise InvalidArgumentError(f"Duplicate node id: {node.id}", {"node_id": node.id})
            idx = self._id_to_idx[node.id]
            previous: GraphNode = self._graph[idx]
            self._nodes_by_type[previous.type].remove(node.id)
            self._graph[idx] = node
        else:
            idx = self._graph.add_node(node)
            self._id_to_idx[node.id] = idx
            self._idx_to_id[idx] = node.id
        self._nodes_by_type[node.type].append(node.id)

    def add_edge(self, edge: GraphEdge) -> bool:
        """Add a link; returns False when either endpoint is missing."""
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return False
        self._graph.add_edge(self._id_to_idx[edge.source], self._id_to_idx[edge.target], edge)
        return True

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def node_ids(self) -> List[str]:
        return [self._idx_to_id[idx] for idx in sorted(self._idx_to_id)]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def has_edge(self, a: str, b: str) -> bool:
        if a not in self._id_to_idx or b not in self._id_to_idx:
            return False
        return self._graph.has_edge(self._id_to_idx[a], self._id_to_idx[b])

    def get_nodes_by_type(self, node_type: NodeType) -> List[GraphNode]:
        return [self._graph[self._id_to_idx[nid]] for nid in self._nodes_by_type.get(node_type, [])]

    def neighbors_of(self, node_id: str) -> List[GraphEdge]:
        """All links incident to a node, in insertion order."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return []
        edge_indices = sorted(self._graph.incident_edges(idx))
        return [self._graph.get_edge_data_by_index(e) for e in edge_indices]

    def related_node_ids(self, focus_node_id: str) -> Set[str]:
        """
        Node ids touched by the focus node's links.

        One hop only. The focus itself is included whenever it has a link.
        """
        related: Set[str] = set()
        for edge in self.neighbors_of(focus_node_id):
            related.add(edge.source)
            related.add(edge.target)
        return related

    def copy(self) -> "AssetGraph":
        """Independent graph with the same nodes and links, in the same order."""
        clone = AssetGraph(self.mode, replace_nodes=self.replace_nodes)
        for node in self.iter_nodes():
            clone.add_node(node)
        for edge in self.iter_edges():
            clone.add_edge(edge)
        return clone

    def find_nodes(self, query: str) -> List[GraphNode]:
        """Case-insensitive substring search over labels, or match on node type."""
        if not query:
            return list(self.nodes)
        q = query.lower()
        return [n for n in self.nodes if q in n.label.lower() or q in n.type.value]

    @property
    def nodes(self) -> List[GraphNode]:
        return [self._graph[idx] for idx in sorted(self._idx_to_id)]

    @property
    def links(self) -> List[GraphEdge]:
        return [self._graph.get_edge_data_by_index(e) for e in sorted(self._graph.edge_indices())]

    def iter_nodes(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def iter_edges(self) -> Iterator[GraphEdge]:
        return iter(self.links)

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        node_counts = {
            node_type.value: len(ids)
            for node_type, ids in self._nodes_by_type.items()
            if ids
        }
        edge_counts: Dict[str, int] = defaultdict(int)
        for edge in self.iter_edges():
            edge_counts[edge.type.value] += 1

        orphans = len([n for n in self._graph.node_indices() if self._graph.degree(n) == 0])

        return {
            "mode": self.mode,
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_type": node_counts,
            "edges_by_type": dict(edge_counts),
            "orphans": orphans,
        }

    def to_dict(self) -> Dict[str, Any]:
        nodes = []
        for node in self.iter_nodes():
            payload = node.model_dump(mode="json", exclude={"asset"})
            payload["asset_id"] = node.asset.id if node.asset else None
            nodes.append(payload)
        return {
            "nodes": nodes,
            "links": [edge.model_dump(mode="json") for edge in self.iter_edges()],
            "stats": self.get_stats(),
        }
