"""Nodes of the SBOM graph: packages and files with their metadata."""

from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass, field
from datetime import datetime

from protobom.sbom.diff import diff_dates, diff_list, diff_map, diff_slice, diff_values
from protobom.sbom.enums import HashAlgorithm, NodeType, Purpose, SoftwareIdentifierType
from protobom.sbom.person import ExternalReference, Person

_FIELD_PREFIX = "protobom.protobom.Node."

_STRING_FIELDS = (
    "name",
    "version",
    "file_name",
    "url_home",
    "url_download",
    "license_concluded",
    "license_comments",
    "copyright",
    "source_info",
    "comment",
    "summary",
    "description",
)
_SLICE_FIELDS = ("licenses", "attribution", "file_types", "primary_purpose")
_DATE_FIELDS = ("release_date", "build_date", "valid_until_date")
_FLATTENABLE_LIST_FIELDS = ("suppliers", "originators", "external_references")
_MAP_FIELDS = ("identifiers", "hashes")

# Every field that update() and augment() may touch; id and type never change.
_MERGEABLE_FIELDS = (
    _STRING_FIELDS + _SLICE_FIELDS + _DATE_FIELDS + _FLATTENABLE_LIST_FIELDS + _MAP_FIELDS
)


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


@dataclass
class Node:
    """A package or file in the SBOM graph."""

    id: str = ""
    type: NodeType = NodeType.PACKAGE
    name: str = ""
    version: str = ""
    file_name: str = ""
    url_home: str = ""
    url_download: str = ""
    licenses: list[str] = field(default_factory=list)
    license_concluded: str = ""
    license_comments: str = ""
    copyright: str = ""
    hashes: dict[int, str] = field(default_factory=dict)
    source_info: str = ""
    primary_purpose: list[Purpose] = field(default_factory=list)
    comment: str = ""
    summary: str = ""
    description: str = ""
    attribution: list[str] = field(default_factory=list)
    suppliers: list[Person] = field(default_factory=list)
    originators: list[Person] = field(default_factory=list)
    release_date: datetime | None = None
    build_date: datetime | None = None
    valid_until_date: datetime | None = None
    external_references: list[ExternalReference] = field(default_factory=list)
    identifiers: dict[int, str] = field(default_factory=dict)
    file_types: list[str] = field(default_factory=list)

    def update(self, other: Node) -> None:
        """Overwrite fields with the non-empty values of ``other``.

        The node's id and type are never changed.
        """
        for name in _MERGEABLE_FIELDS:
            value = getattr(other, name)
            if value:
                setattr(self, name, value)

    def augment(self, other: Node) -> None:
        """Fill in fields that are empty here with the values of ``other``."""
        for name in _MERGEABLE_FIELDS:
            value = getattr(other, name)
            if not getattr(self, name) and value:
                setattr(self, name, value)

    def copy(self) -> Node:
        """Return a duplicate of the node, copying nested data."""
        return Node(
            id=self.id,
            type=self.type,
            name=self.name,
            version=self.version,
            file_name=self.file_name,
            url_home=self.url_home,
            url_download=self.url_download,
            licenses=list(self.licenses),
            license_concluded=self.license_concluded,
            license_comments=self.license_comments,
            copyright=self.copyright,
            hashes=dict(self.hashes),
            source_info=self.source_info,
            primary_purpose=list(self.primary_purpose),
            comment=self.comment,
            summary=self.summary,
            description=self.description,
            attribution=list(self.attribution),
            suppliers=[person.copy() for person in self.suppliers],
            originators=[person.copy() for person in self.originators],
            release_date=self.release_date,
            build_date=self.build_date,
            valid_until_date=self.valid_until_date,
            external_references=[ref.copy() for ref in self.external_references],
            identifiers=dict(self.identifiers),
            file_types=list(self.file_types),
        )

    def equal(self, other: Node | None) -> bool:
        """Return True if both nodes hold the same data."""
        if other is None:
            return False
        return self.flat_string() == other.flat_string()

    def flat_string(self) -> str:
        """Return a deterministic string of the node's populated fields."""
        pairs: list[str] = []

        if self.id:
            pairs.append(f"{_FIELD_PREFIX}id:{self.id}")
        if int(self.type):
            pairs.append(f"{_FIELD_PREFIX}type:{int(self.type)}")
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value:
                pairs.append(f"{_FIELD_PREFIX}{name}:{value}")

        for name in ("licenses", "attribution", "file_types"):
            values = getattr(self, name)
            if values:
                pairs.append(_flat_slice(name, [str(v) for v in values]))
        if self.primary_purpose:
            pairs.append(
                _flat_slice("primary_purpose", [str(int(p)) for p in self.primary_purpose])
            )

        if self.hashes:
            by_key = {str(algo): value for algo, value in self.hashes.items()}
            flat = "".join(f"{key}:{by_key[key]}" for key in sorted(by_key))
            pairs.append(f"{_FIELD_PREFIX}hashes:{flat}")

        for name in _DATE_FIELDS:
            moment = getattr(self, name)
            if moment is not None:
                pairs.append(f"{_FIELD_PREFIX}{name}:{_unix(moment)}")

        pairs.extend(
            f"identifiers[{key}]:{self.identifiers[key]}"
            for key in sorted(int(k) for k in self.identifiers)
        )
        pairs.extend(f"supplier:{p.flat_string()}" for p in self.suppliers)
        pairs.extend(f"originator:{p.flat_string()}" for p in self.originators)
        pairs.extend(f"extref:{e.flat_string()}" for e in self.external_references)

        return ":".join(sorted(pairs))

    def checksum(self) -> str:
        """Return the hex SHA-256 digest of the node's flat string."""
        return hashlib.sha256(self.flat_string().encode("utf-8")).hexdigest()

    def purl(self) -> str:
        """Return the node's package URL, or an empty string for files."""
        if self.type == NodeType.FILE:
            return ""
        return self.identifiers.get(int(SoftwareIdentifierType.PURL), "")

    def hashes_match(self, hashes: dict[int, str]) -> bool:
        """Return True if every hash sharing an algorithm with the node matches.

        At least one algorithm must be common; empty hash sets never match.
        """
        if not self.hashes or not hashes:
            return False
        matched = False
        for algo, value in hashes.items():
            if algo not in self.hashes:
                continue
            if self.hashes[algo] != value:
                return False
            matched = True
        return matched

    def add_hash(self, algo: HashAlgorithm, value: str) -> None:
        """Set the hash for ``algo``, replacing any existing one; empty values are ignored."""
        if not value:
            return
        self.hashes[int(algo)] = value

    def diff(self, other: Node) -> NodeDiff | None:
        """Return what changed from this node to ``other``, or None if nothing did."""
        added = Node()
        removed = Node()
        count = 0

        for name in ("id", *_STRING_FIELDS):
            plus, minus, changed = diff_values(getattr(self, name), getattr(other, name))
            setattr(added, name, plus)
            setattr(removed, name, minus)
            count += changed

        if self.type != other.type:
            added.type = other.type
            count += 1

        for name in _SLICE_FIELDS:
            plus, minus, changed = diff_slice(getattr(self, name), getattr(other, name))
            setattr(added, name, plus)
            setattr(removed, name, minus)
            count += changed

        for name in _DATE_FIELDS:
            plus, minus, changed = diff_dates(getattr(self, name), getattr(other, name))
            setattr(added, name, plus)
            setattr(removed, name, minus)
            count += changed

        for name in _FLATTENABLE_LIST_FIELDS:
            plus, minus, changed = diff_list(getattr(self, name), getattr(other, name))
            setattr(added, name, plus)
            setattr(removed, name, minus)
            count += changed

        for name in _MAP_FIELDS:
            plus, minus, changed = diff_map(getattr(self, name), getattr(other, name))
            setattr(added, name, plus)
            setattr(removed, name, minus)
            count += changed

        if count > 0:
            return NodeDiff(added=added, removed=removed, diff_count=count)
        return None


def _flat_slice(name: str, values: list[str]) -> str:
    return "".join(
        f"{_FIELD_PREFIX}{name}[{position}]:{value}"
        for position, value in enumerate(sorted(values))
    )


@dataclass
class NodeDiff:
    """Fields added and removed between two nodes, with the number of changed fields."""

    added: Node = field(default_factory=Node)
    removed: Node = field(default_factory=Node)
    diff_count: int = 0