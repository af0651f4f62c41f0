"""Fragments of the SBOM graph: nodes, the edges between them and their roots."""

from __future__ import annotations

from dataclasses import dataclass, field

from protobom.sbom.edge import Edge, EdgeType
from protobom.sbom.enums import software_identifier_type_from_string
from protobom.sbom.node import Node


class MoreThanOneMatchError(LookupError):
    """Raised when a lookup that must be unique matches several nodes."""

    def __init__(self, message: str = "more than one node matches") -> None:
        super().__init__(message)


def _hash_key(algo: int, value: str) -> str:
    return f"{int(algo)}:{value}"


@dataclass
class NodeList:
    """A set of nodes, the typed edges between them and the top-level node IDs."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    root_elements: list[str] = field(default_factory=list)

    def _index_nodes(self) -> dict[str, Node]:
        return {node.id: node for node in self.nodes}

    def _index_edges(self) -> dict[str, dict[EdgeType, list[Edge]]]:
        index: dict[str, dict[EdgeType, list[Edge]]] = {}
        for edge in self.edges:
            index.setdefault(edge.from_, {}).setdefault(edge.type, []).append(edge)
        return index

    def _index_root_elements(self) -> set[str]:
        return set(self.root_elements)

    def index_nodes_by_hash(self) -> dict[str, list[Node]]:
        """Index nodes by ``"<algorithm>:<value>"``; several nodes may share a key."""
        index: dict[str, list[Node]] = {}
        for node in self.nodes:
            for algo, value in node.hashes.items():
                if not value:
                    continue
                index.setdefault(_hash_key(algo, value), []).append(node)
        return index

    def index_nodes_by_purl(self) -> dict[str, list[Node]]:
        """Index nodes by package URL; several nodes may share a purl."""
        index: dict[str, list[Node]] = {}
        for node in self.nodes:
            purl = node.purl()
            if purl:
                index.setdefault(purl, []).append(node)
        return index

    def clean_edges(self) -> None:
        """Drop dangling edges and destinations, merging edges of the same source and type."""
        node_index = self._index_nodes()
        merged: dict[tuple[str, int], Edge] = {}
        destinations: dict[tuple[str, int], dict[str, None]] = {}

        for edge in self.edges:
            if edge.from_ not in node_index:
                continue
            key = (edge.from_, int(edge.type))
            if key not in merged:
                merged[key] = Edge(type=edge.type, from_=edge.from_, to=[])
                destinations[key] = {}
            for dest in edge.to:
                if dest in node_index:
                    destinations[key][dest] = None

        self.edges = [
            Edge(type=edge.type, from_=edge.from_, to=list(destinations[key]))
            for key, edge in merged.items()
            if destinations[key]
        ]

    def add_edge(self, edge: Edge) -> None:
        """Append an edge to the node list."""
        self.edges.append(edge)

    def add_root_node(self, node: Node) -> None:
        """Add a node and register it as a root element.

        Nodes without an ID, or already registered as roots, are ignored.
        """
        if not node.id or node.id in self.root_elements:
            return
        self.add_node(node)
        self.root_elements.append(node.id)

    def add_node(self, node: Node) -> None:
        """Append a node to the node list."""
        self.nodes.append(node)

    def add(self, other: NodeList) -> None:
        """Merge the nodes, edges and roots of ``other`` into this node list in place."""
        existing_nodes = self._index_nodes()
        for node in other.nodes:
            if node.id not in existing_nodes:
                self.nodes.append(node)

        existing_edges = self._index_edges()
        for edge in other.edges:
            by_type = existing_edges.get(edge.from_)
            if by_type is None or edge.type not in by_type:
                self.edges.append(edge)
                continue
            by_type[edge.type][0].to.extend(edge.to)

        roots = self._index_root_elements()
        for root_id in other.root_elements:
            if root_id not in roots:
                self.root_elements.append(root_id)

        self.clean_edges()

    def remove_nodes(self, ids: list[str]) -> None:
        """Remove the nodes with the given IDs and the edges that pointed at them."""
        doomed = set(ids)
        self.nodes = [node for node in self.nodes if node.id not in doomed]
        self.clean_edges()

    def get_edge_by_type(self, from_element: str, edge_type: EdgeType) -> Edge | None:
        """Return the first edge of ``edge_type`` leaving ``from_element``, if any."""
        return next(
            (e for e in self.edges if e.from_ == from_element and e.type == edge_type),
            None,
        )

    def copy(self) -> NodeList:
        """Return a deep duplicate of the node list."""
        return NodeList(
            nodes=[node.copy() for node in self.nodes],
            edges=[edge.copy() for edge in self.edges],
            root_elements=list(self.root_elements),
        )

    def intersect(self, other: NodeList) -> NodeList:
        """Return the nodes present in both lists, updated with data from ``other``."""
        roots = self._index_root_elements()
        other_roots = other._index_root_elements()
        other_index = other._index_nodes()

        result = NodeList(edges=[edge.copy() for edge in self.edges])
        for node_id, node in self._index_nodes().items():
            if node_id not in other_index:
                continue
            merged = node.copy()
            merged.update(other_index[node_id])
            result.nodes.append(merged)
            if node_id in roots or node_id in other_roots:
                result.root_elements.append(node_id)

        for edge in other.edges:
            existing = result.get_edge_by_type(edge.from_, edge.type)
            if existing is None:
                result.edges.append(edge.copy())
                continue
            present = set(existing.to)
            for dest in edge.to:
                if dest not in present:
                    existing.to.append(dest)

        result.clean_edges()
        return result

    def union(self, other: NodeList) -> NodeList:
        """Return the combination of both lists; shared nodes are updated from ``other``."""
        result = NodeList(
            nodes=[node.copy() for node in self.nodes],
            edges=[edge.copy() for edge in self.edges],
            root_elements=list(self.root_elements),
        )

        node_index = result._index_nodes()
        for node in other.nodes:
            if node.id in node_index:
                node_index[node.id].update(node)
            else:
                result.nodes.append(node)

        for edge in other.edges:
            existing = result.get_edge_by_type(edge.from_, edge.type)
            if existing is None:
                result.edges.append(edge.copy())
                continue
            for dest in edge.to:
                if not existing.points_to(dest):
                    existing.to.append(dest)

        result.clean_edges()

        roots = result._index_root_elements()
        for root_id in other.root_elements:
            if root_id not in roots:
                result.root_elements.append(root_id)

        return result

    def get_nodes_by_name(self, name: str) -> list[Node]:
        """Return all nodes with the given name."""
        return [node for node in self.nodes if node.name == name]

    def get_node_by_id(self, id: str) -> Node | None:
        """Return the first node with the given ID, if any."""
        return next((node for node in self.nodes if node.id == id), None)

    def get_matching_node(self, node: Node) -> Node | None:
        """Find the single node describing the same software as ``node``.

        Nodes are matched by hashes first and by package URL when needed.
        Raises MoreThanOneMatchError when the match is ambiguous.
        """
        found: dict[str, Node] = {}
        if node.hashes:
            hash_index = self.index_nodes_by_hash()
            for algo, value in node.hashes.items():
                for candidate in hash_index.get(_hash_key(algo, value), []):
                    if candidate.id in found:
                        continue
                    if candidate.hashes_match(node.hashes):
                        found[candidate.id] = candidate

        test_purl = node.purl()
        if len(found) == 1:
            return next(iter(found.values()))

        if not found:
            if not test_purl:
                return None
            matches = self.index_nodes_by_purl().get(test_purl)
            if not matches:
                return None
            if len(matches) == 1:
                return matches[0]
            raise MoreThanOneMatchError()

        if not test_purl:
            raise MoreThanOneMatchError()
        by_purl = [n for n in found.values() if n.purl() and n.purl() == test_purl]
        if len(by_purl) == 1:
            return by_purl[0]
        raise MoreThanOneMatchError()

    def get_nodes_by_identifier(self, id_type: str, value: str) -> list[Node]:
        """Return nodes whose identifier of type ``id_type`` equals ``value``."""
        key = int(software_identifier_type_from_string(id_type))
        return [
            node
            for node in self.nodes
            if key in node.identifiers and node.identifiers[key] == value
        ]

    def get_root_nodes(self) -> list[Node]:
        """Return the nodes registered as root elements; missing ones are skipped."""
        roots = self._index_root_elements()
        result: list[Node] = []
        for node in self.nodes:
            if node.id in roots:
                result.append(node)
                if len(result) == len(roots):
                    break
        return result

    def equal(self, other: NodeList | None) -> bool:
        """Return True if both lists hold the same nodes, edges and roots."""
        if other is None:
            return False
        if (
            len(self.edges) != len(other.edges)
            or len(self.nodes) != len(other.nodes)
            or len(self.root_elements) != len(other.root_elements)
        ):
            return False
        if sorted(self.root_elements) != sorted(other.root_elements):
            return False
        if sorted(e.flat_string() for e in self.edges) != sorted(
            e.flat_string() for e in other.edges
        ):
            return False
        mine = {node.id: node.checksum() for node in self.nodes}
        theirs = {node.id: node.checksum() for node in other.nodes}
        return mine == theirs