import re
import uuid

import pytest

from protobom.sbom.edge import EdgeType
from protobom.sbom.identifiers import edge_type_from_spdx, new_node_identifier

VALID_ID = re.compile(r"^[a-zA-Z0-9\-.]+$")


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        ([], ""),
        (["node"], ""),
        (["node", "auto"], ""),
        (["node", "hello"], "protobom-node--hello"),
        (["node", "auto", "my package"], "protobom-node-auto--my-package"),
        (["auto", "node", "my package"], "protobom-auto-node--my-package"),
        (["Hello"], "protobom--Hello"),
        (["I have invalid char$ and sp@ces"], ""),
    ],
)
def test_new_node_identifier(parts, expected):
    identifier = new_node_identifier(*parts)
    assert VALID_ID.match(identifier), identifier
    if expected:
        assert identifier == expected


def test_identifier_without_parts_uses_uuid():
    identifier = new_node_identifier()
    assert identifier.startswith("protobom--")
    generated = identifier[len("protobom--"):]
    assert str(uuid.UUID(generated)) == generated


def test_identifiers_without_parts_are_unique():
    assert len({new_node_identifier() for _ in range(20)}) == 20


def test_known_prefixes_only_keep_uuid():
    identifier = new_node_identifier("node", "auto")
    assert identifier.startswith("protobom-node-auto--")
    assert VALID_ID.match(identifier)


def test_invalid_characters_are_encoded():
    identifier = new_node_identifier("I have invalid char$ and sp@ces")
    assert "$" not in identifier
    assert "@" not in identifier
    assert " " not in identifier
    assert "C36" in identifier
    assert "C64" in identifier


def test_separators_become_dashes():
    assert new_node_identifier("a/b:c d") == "protobom--a-b-c-d"


def test_known_prefix_after_valid_part_is_kept_as_part():
    assert new_node_identifier("hello", "node") == "protobom--hello-node"


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("DEPENDS_ON", EdgeType.DEPENDS_ON),
        ("CONTAINS", EdgeType.CONTAINS),
        ("PATCH_FOR", EdgeType.PATCH),
        ("HAS_PREREQUISITE", EdgeType.PREREQUISITE),
        ("VARIANT_OF", EdgeType.VARIANT),
        ("PATCH_APPLIED", EdgeType.UNKNOWN),
        ("CONTAINED_BY", EdgeType.UNKNOWN),
        ("DEPENDENCY_OF", EdgeType.UNKNOWN),
        ("depends_on", EdgeType.UNKNOWN),
        ("NOT_A_LABEL", EdgeType.UNKNOWN),
    ],
)
def test_edge_type_from_spdx(label, expected):
    assert edge_type_from_spdx(label) is expected