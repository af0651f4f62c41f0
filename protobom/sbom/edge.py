"""Typed, directed edges of the SBOM graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class EdgeType(IntEnum):
    """Relationship types between nodes of the SBOM graph."""

    UNKNOWN = 0
    AMENDS = 1
    ANCESTOR = 2
    BUILD_DEPENDENCY = 3
    BUILD_TOOL = 4
    CONTAINS = 5
    CONTAINED_BY = 6
    COPY = 7
    DATA_FILE = 8
    DEPENDENCY_MANIFEST = 9
    DEPENDS_ON = 10
    DEPENDENCY_OF = 11
    DESCENDANT = 12
    DESCRIBES = 13
    DESCRIBED_BY = 14
    DEV_DEPENDENCY = 15
    DEV_TOOL = 16
    DISTRIBUTION_ARTIFACT = 17
    DOCUMENTATION = 18
    DYNAMIC_LINK = 19
    EXAMPLE = 20
    EXPANDED_FROM_ARCHIVE = 21
    FILE_ADDED = 22
    FILE_DELETED = 23
    FILE_MODIFIED = 24
    GENERATES = 25
    GENERATED_FROM = 26
    METAFILE = 27
    OPTIONAL_COMPONENT = 28
    OPTIONAL_DEPENDENCY = 29
    OTHER = 30
    PACKAGES = 31
    PATCH = 32
    PREREQUISITE = 33
    PREREQUISITE_FOR = 34
    PROVIDED_DEPENDENCY = 35
    REQUIREMENT_FOR = 36
    RUNTIME_DEPENDENCY = 37
    SPECIFICATION_FOR = 38
    STATIC_LINK = 39
    TEST = 40
    TEST_CASE = 41
    TEST_DEPENDENCY = 42
    TEST_TOOL = 43
    VARIANT = 44

    @property
    def proto_name(self) -> str:
        """The name of the type as written in the data model definition."""
        if self is EdgeType.UNKNOWN:
            return "UNKNOWN"
        if self is EdgeType.CONTAINED_BY:
            return "contained_by"
        first, *rest = self.name.lower().split("_")
        return first + "".join(part.capitalize() for part in rest)

    def to_spdx2(self) -> str:
        """Return the SPDX 2 relationship label for this edge type."""
        return _TO_SPDX2.get(self, "")


_TO_SPDX2: dict[EdgeType, str] = {
    EdgeType.AMENDS: "AMENDS",
    EdgeType.ANCESTOR: "ANCESTOR_OF",
    EdgeType.BUILD_DEPENDENCY: "BUILD_DEPENDENCY_OF",
    EdgeType.BUILD_TOOL: "BUILD_TOOL_OF",
    EdgeType.CONTAINS: "CONTAINS",
    EdgeType.CONTAINED_BY: "CONTAINED_BY",
    EdgeType.COPY: "COPY_OF",
    EdgeType.DATA_FILE: "DATA_FILE_OF",
    EdgeType.DEPENDENCY_MANIFEST: "DEPENDENCY_MANIFEST_OF",
    EdgeType.DEPENDS_ON: "DEPENDS_ON",
    EdgeType.DEPENDENCY_OF: "DEPENDENCY_OF",
    EdgeType.DESCENDANT: "DESCENDANT_OF",
    EdgeType.DESCRIBES: "DESCRIBES",
    EdgeType.DESCRIBED_BY: "DESCRIBED_BY",
    EdgeType.DEV_DEPENDENCY: "DEV_DEPENDENCY_OF",
    EdgeType.DEV_TOOL: "DEV_TOOL_OF",
    EdgeType.DISTRIBUTION_ARTIFACT: "DISTRIBUTION_ARTIFACT",
    EdgeType.DOCUMENTATION: "DOCUMENTATION_OF",
    EdgeType.DYNAMIC_LINK: "DYNAMIC_LINK",
    EdgeType.EXAMPLE: "EXAMPLE_OF",
    EdgeType.EXPANDED_FROM_ARCHIVE: "EXPANDED_FROM_ARCHIVE",
    EdgeType.FILE_ADDED: "FILE_ADDED",
    EdgeType.FILE_DELETED: "FILE_DELETED",
    EdgeType.FILE_MODIFIED: "FILE_MODIFIED",
    EdgeType.GENERATES: "GENERATES",
    EdgeType.GENERATED_FROM: "GENERATED_FROM",
    EdgeType.METAFILE: "METAFILE_OF",
    EdgeType.OPTIONAL_COMPONENT: "OPTIONAL_COMPONENT_OF",
    EdgeType.OPTIONAL_DEPENDENCY: "OPTIONAL_DEPENDENCY_OF",
    EdgeType.OTHER: "OTHER",
    EdgeType.PACKAGES: "PACKAGE_OF",
    EdgeType.PATCH: "PATCH_APPLIED",
    EdgeType.PREREQUISITE: "HAS_PREREQUISITE",
    EdgeType.PREREQUISITE_FOR: "PREREQUISITE_FOR",
    EdgeType.PROVIDED_DEPENDENCY: "PROVIDED_DEPENDENCY_OF",
    EdgeType.REQUIREMENT_FOR: "REQUIREMENT_DESCRIPTION_FOR",
    EdgeType.RUNTIME_DEPENDENCY: "RUNTIME_DEPENDENCY_OF",
    EdgeType.SPECIFICATION_FOR: "SPECIFICATION_FOR",
    EdgeType.STATIC_LINK: "STATIC_LINK",
    EdgeType.TEST: "TEST_OF",
    EdgeType.TEST_CASE: "TEST_CASE_OF",
    EdgeType.TEST_DEPENDENCY: "TEST_DEPENDENCY_OF",
    EdgeType.TEST_TOOL: "TEST_TOOL_OF",
    EdgeType.VARIANT: "VARIANT_OF",
}

_FROM_SPDX2: dict[str, EdgeType] = {label: et for et, label in _TO_SPDX2.items()}
_FROM_SPDX2["PATCH_FOR"] = EdgeType.PATCH


def edge_type_from_spdx2(spdx2_type: str) -> EdgeType:
    """Resolve an SPDX 2 relationship label (case-insensitive) to an edge type."""
    return _FROM_SPDX2.get(spdx2_type.upper(), EdgeType.UNKNOWN)


@dataclass
class Edge:
    """A directed edge from one node to one or more destination nodes."""

    type: EdgeType = EdgeType.UNKNOWN
    from_: str = ""
    to: list[str] = field(default_factory=list)

    def copy(self) -> Edge:
        """Return a duplicate of the edge."""
        return Edge(type=self.type, from_=self.from_, to=list(self.to))

    def points_to(self, id: str) -> bool:
        """Return True if the edge lists ``id`` among its destinations."""
        return id in self.to

    def equal(self, other: Edge | None) -> bool:
        """Return True if both edges have the same source, type and destinations."""
        if other is None:
            return False
        return self.flat_string() == other.flat_string()

    def flat_string(self) -> str:
        """Return a deterministic string of the edge contents for comparison."""
        try:
            type_name = EdgeType(self.type).proto_name
        except ValueError:
            type_name = str(int(self.type))
        return f"{self.from_}:{type_name}:{'+'.join(sorted(self.to))}"

    def add_destination_by_id(self, *args: str) -> None:
        """Add destination IDs, skipping any already present."""
        seen = set(self.to)
        for dest in args:
            if dest in seen:
                continue
            seen.add(dest)
            self.to.append(dest)