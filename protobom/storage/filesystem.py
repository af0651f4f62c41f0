"""A storage backend that keeps documents as files in a directory."""

from __future__ import annotations

import hashlib
import json
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, TypeVar

from protobom.sbom.document import Document, Metadata, Tool
from protobom.sbom.edge import Edge, EdgeType
from protobom.sbom.enums import ExternalReferenceType, NodeType, Purpose
from protobom.sbom.node import Node
from protobom.sbom.nodelist import NodeList
from protobom.sbom.person import ExternalReference, Person
from protobom.storage.backend import RetrieveOptions, StoreOptions

E = TypeVar("E", bound=IntEnum)


def generate_doc_file_name(document_id: str) -> str:
    """Return the file name under which the document with ``document_id`` is kept."""
    if not document_id:
        raise ValueError("unable to generate filename, document ID not set")
    return hashlib.sha256(document_id.encode("utf-8")).hexdigest() + ".protobom"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"cannot encode {type(value).__name__}")


def _encode(doc: Document) -> bytes:
    return json.dumps(asdict(doc), default=_json_default, sort_keys=True).encode("utf-8")


def _enum(cls: type[E], value: int) -> E | int:
    try:
        return cls(value)
    except ValueError:
        return value


def _int_keys(mapping: dict[str, str]) -> dict[int, str]:
    return {int(key): value for key, value in mapping.items()}


def _date(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _person(data: dict[str, Any]) -> Person:
    contacts = data.get("contacts")
    return Person(
        name=data["name"],
        is_org=data["is_org"],
        email=data["email"],
        url=data["url"],
        phone=data["phone"],
        contacts=None if contacts is None else [_person(c) for c in contacts],
    )


def _external_reference(data: dict[str, Any]) -> ExternalReference:
    return ExternalReference(
        url=data["url"],
        type=_enum(ExternalReferenceType, data["type"]),
        comment=data["comment"],
        authority=data["authority"],
        hashes=_int_keys(data["hashes"]),
    )


def _node(data: dict[str, Any]) -> Node:
    fields = dict(data)
    fields["type"] = _enum(NodeType, data["type"])
    fields["hashes"] = _int_keys(data["hashes"])
    fields["identifiers"] = _int_keys(data["identifiers"])
    fields["primary_purpose"] = [_enum(Purpose, p) for p in data["primary_purpose"]]
    fields["suppliers"] = [_person(p) for p in data["suppliers"]]
    fields["originators"] = [_person(p) for p in data["originators"]]
    fields["external_references"] = [
        _external_reference(e) for e in data["external_references"]
    ]
    for name in ("release_date", "build_date", "valid_until_date"):
        fields[name] = _date(data[name])
    return Node(**fields)


def _edge(data: dict[str, Any]) -> Edge:
    return Edge(type=_enum(EdgeType, data["type"]), from_=data["from_"], to=list(data["to"]))


def _decode(raw: bytes) -> Document:
    data = json.loads(raw.decode("utf-8"))
    meta = data["metadata"]
    metadata = Metadata(
        id=meta["id"],
        version=meta["version"],
        name=meta["name"],
        date=_date(meta["date"]),
        tools=[Tool(**tool) for tool in meta["tools"]],
        authors=[_person(p) for p in meta["authors"]],
    )
    nl = data["node_list"]
    node_list = NodeList(
        nodes=[_node(n) for n in nl["nodes"]],
        edges=[_edge(e) for e in nl["edges"]],
        root_elements=list(nl["root_elements"]),
    )
    return Document(metadata=metadata, node_list=node_list)


@dataclass
class FileSystem:
    """Backend that writes each document to a file in the directory ``path``."""

    path: str = ""

    def store(self, bom: Document, opts: StoreOptions | None = None) -> None:
        """Write ``bom`` into the data directory, creating the directory if needed."""
        if opts is None:
            opts = StoreOptions()

        directory = os.fspath(self.path)
        if not os.path.exists(directory):
            try:
                os.makedirs(directory)
            except OSError as err:
                raise OSError("error creating filesystem backend storage directory") from err
        elif not os.path.isdir(directory):
            raise NotADirectoryError("the specified filesystem backend path is not a directory")

        if bom.metadata is None or not bom.metadata.id:
            raise ValueError("unable to persist document: no document id set")

        data = _encode(bom)
        target = os.path.join(directory, generate_doc_file_name(bom.metadata.id))

        if opts.no_clobber and os.path.exists(target):
            raise FileExistsError(
                "there is already an entry for the specified document (and no_clobber is set)"
            )

        with open(target, "wb") as stream:
            stream.write(data)

    def retrieve(self, id: str, opts: RetrieveOptions | None = None) -> Document:
        """Read back the document stored under ``id``."""
        if not self.path:
            raise ValueError("unable to retrieve SBOM data: filesystem backend data dir not set")
        if not id:
            raise ValueError("unable to retrieve SBOM data: no identifier defined")

        target = os.path.join(os.fspath(self.path), generate_doc_file_name(id))
        with open(target, "rb") as stream:
            raw = stream.read()
        try:
            return _decode(raw)
        except (KeyError, TypeError, ValueError) as err:
            raise ValueError(f"unmarshaling protobom data: {err}") from err