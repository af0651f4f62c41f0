"""Node identifier generation and SPDX relationship label lookup."""

from __future__ import annotations

import re
import uuid

from protobom.sbom.edge import EdgeType

NODE_IDENTIFIER_PREFIX = "protobom"

_INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9\-.]+")
_PROTOBOM_PREFIXES = frozenset({"auto", "node"})
_SEPARATORS = ("/", ":", " ")

# Relationship labels that only resolve through edge_type_from_spdx2.
_NOT_RESOLVED_BY_SPDX = frozenset(
    {
        "CONTAINED_BY",
        "DEPENDENCY_OF",
        "DESCRIBED_BY",
        "GENERATED_FROM",
        "PATCH_APPLIED",
        "PREREQUISITE_FOR",
    }
)

_FROM_SPDX: dict[str, EdgeType] = {
    edge_type.to_spdx2(): edge_type
    for edge_type in EdgeType
    if edge_type.to_spdx2() and edge_type.to_spdx2() not in _NOT_RESOLVED_BY_SPDX
}
_FROM_SPDX["PATCH_FOR"] = EdgeType.PATCH


def _encode_invalid(match: re.Match[str]) -> str:
    return "".join(f"C{byte}" for byte in match.group(0).encode("utf-8", "surrogatepass"))


def new_node_identifier(*args: str) -> str:
    """Build an identifier usable in both CycloneDX and SPDX documents.

    Leading ``auto``/``node`` parts become known prefixes; the remaining parts
    are sanitised and joined. Without usable parts a random UUID is used.
    """
    valid: list[str] = []
    known: list[str] = [NODE_IDENTIFIER_PREFIX]
    for part in args:
        if part in _PROTOBOM_PREFIXES and not valid:
            known.append(part)
            continue
        for separator in _SEPARATORS:
            part = part.replace(separator, "-")
        part = _INVALID_ID_CHARS.sub(_encode_invalid, part)
        if part:
            valid.append(part)

    if not valid:
        valid.append(str(uuid.uuid4()))

    valid[0] = "-" + valid[0]
    return "-".join(known + valid)


def edge_type_from_spdx(spdx_name: str) -> EdgeType:
    """Resolve an SPDX 2 relationship label (case-sensitive) to an edge type."""
    return _FROM_SPDX.get(spdx_name, EdgeType.UNKNOWN)