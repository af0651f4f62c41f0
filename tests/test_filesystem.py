import os
from datetime import datetime, timezone

import pytest

from protobom.sbom.document import Document, Metadata, Tool, new_document
from protobom.sbom.edge import Edge, EdgeType
from protobom.sbom.enums import ExternalReferenceType, HashAlgorithm, Purpose, SoftwareIdentifierType
from protobom.sbom.node import Node
from protobom.sbom.person import ExternalReference, Person
from protobom.storage.backend import StoreOptions
from protobom.storage.filesystem import FileSystem, generate_doc_file_name


def test_normal_io(tmp_path):
    fs = FileSystem(path=str(tmp_path))
    doc = Document(metadata=Metadata(id="test-document"))
    fs.store(doc, None)

    filename = generate_doc_file_name(doc.metadata.id)
    assert (tmp_path / filename).is_file()

    result = fs.retrieve(doc.metadata.id, None)
    assert result.metadata.id == "test-document"


def test_generate_doc_file_name_shape():
    name = generate_doc_file_name("test-document")
    assert name.endswith(".protobom")
    assert len(name) == 64 + len(".protobom")
    assert name == generate_doc_file_name("test-document")
    assert name != generate_doc_file_name("other-document")


def test_generate_doc_file_name_requires_id():
    with pytest.raises(ValueError):
        generate_doc_file_name("")


def test_round_trip_full_document(tmp_path):
    doc = new_document()
    doc.metadata.id = "rich-doc"
    doc.metadata.name = "Rich"
    doc.metadata.date = datetime(2023, 11, 15, 13, 30, tzinfo=timezone.utc)
    doc.metadata.tools.append(Tool(name="ACME SBOM Tool", version="1.0", vendor="ACME"))
    doc.metadata.authors.append(Person(name="John Doe", email="john@example.com"))
    root = Node(
        id="root",
        name="app",
        version="1.0.0",
        licenses=["Apache-2.0"],
        primary_purpose=[Purpose.APPLICATION],
        hashes={int(HashAlgorithm.SHA1): "781721ca4eccbf8fe65c44dcdf141ca1b4e44adf"},
        identifiers={int(SoftwareIdentifierType.PURL): "pkg:generic/app@1.0.0"},
        suppliers=[Person(name="ACME", is_org=True, contacts=[Person(name="Jane")])],
        release_date=datetime(2023, 10, 16, 11, 41, tzinfo=timezone.utc),
        external_references=[
            ExternalReference(url="http://example.com/repo", type=ExternalReferenceType.VCS)
        ],
    )
    child = Node(id="child", name="lib")
    doc.node_list.add_root_node(root)
    doc.node_list.add_node(child)
    doc.node_list.add_edge(Edge(type=EdgeType.CONTAINS, from_="root", to=["child"]))

    fs = FileSystem(path=str(tmp_path))
    fs.store(doc)
    result = fs.retrieve("rich-doc")

    assert result.metadata == doc.metadata
    assert result.node_list.equal(doc.node_list)
    restored = result.node_list.get_node_by_id("root")
    assert restored.suppliers[0].contacts[0].name == "Jane"
    assert restored.primary_purpose == [Purpose.APPLICATION]
    assert result.node_list.edges[0].type is EdgeType.CONTAINS


def test_store_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "data"
    fs = FileSystem(path=str(target))
    fs.store(Document(metadata=Metadata(id="doc")))
    assert (target / generate_doc_file_name("doc")).is_file()


def test_store_requires_document_id(tmp_path):
    fs = FileSystem(path=str(tmp_path))
    with pytest.raises(ValueError):
        fs.store(Document(metadata=Metadata(id="")))


def test_store_rejects_file_path(tmp_path):
    file_path = tmp_path / "plain"
    file_path.write_text("x")
    fs = FileSystem(path=str(file_path))
    with pytest.raises(NotADirectoryError):
        fs.store(Document(metadata=Metadata(id="doc")))


def test_no_clobber(tmp_path):
    fs = FileSystem(path=str(tmp_path))
    doc = Document(metadata=Metadata(id="doc"))
    fs.store(doc)
    with pytest.raises(FileExistsError):
        fs.store(doc, StoreOptions(no_clobber=True))
    fs.store(Document(metadata=Metadata(id="doc", name="second")), StoreOptions())
    assert fs.retrieve("doc").metadata.name == "second"


def test_retrieve_requires_path():
    with pytest.raises(ValueError):
        FileSystem().retrieve("doc")


def test_retrieve_requires_id(tmp_path):
    with pytest.raises(ValueError):
        FileSystem(path=str(tmp_path)).retrieve("")


def test_retrieve_missing_document(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystem(path=str(tmp_path)).retrieve("absent")


def test_retrieve_corrupt_data(tmp_path):
    fs = FileSystem(path=str(tmp_path))
    with open(os.path.join(tmp_path, generate_doc_file_name("doc")), "wb") as stream:
        stream.write(b"{}")
    with pytest.raises(ValueError):
        fs.retrieve("doc")