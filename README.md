# protobom

A format-neutral model of Software Bill of Materials (SBOM) data.

An SBOM is held as a graph. Packages and files are `Node`s. Typed `Edge`s
connect them. A `NodeList` holds a group of nodes, the edges between them and
the IDs of its top-level (root) nodes. A `Document` pairs a `NodeList` with
`Metadata`.

## Installation

```
pip install protobom
```

To run the test suite:

```
pip install "protobom[test]"
pytest
```

## Building a document

```python
from protobom.sbom.document import Tool, new_document
from protobom.sbom.edge import Edge, EdgeType
from protobom.sbom.enums import HashAlgorithm, Purpose
from protobom.sbom.node import Node
from protobom.sbom.person import Person

doc = new_document()
doc.metadata.id = "acme_my_software_v0.1.0"
doc.metadata.name = "My software name"
doc.metadata.authors.append(Person(name="John Doe", email="john@example.com"))
doc.metadata.tools.append(Tool(name="ACME SBOM Tool", version="1.0", vendor="ACME Corporation"))

app = Node(
    id="pkg:generic/my-software@v1.0.0",
    name="My Software Name",
    version="v1.0.0",
    primary_purpose=[Purpose.APPLICATION],
    licenses=["Apache-2.0"],
)
lib = Node(id="pkg:generic/my-lib@v2.0.0", name="my-lib", version="v2.0.0")
lib.add_hash(HashAlgorithm.SHA256, "b51261db1ecadecf85274e811e537c5811a0ad1ab2a0121aeac4e3d031e1bf83")

doc.node_list.add_root_node(app)
doc.node_list.add_node(lib)
doc.node_list.add_edge(Edge(type=EdgeType.DEPENDS_ON, from_=app.id, to=[lib.id]))

print([n.name for n in doc.get_root_nodes()])
```

`add_root_node` ignores nodes that have no ID or that are already roots.

## Nodes

`Node` (in `protobom.sbom.node`) is a dataclass. It has these methods:

- `update(other)` overwrites fields with the non-empty values of `other`.
  `augment(other)` fills in only the fields that are still empty. Neither one
  changes `id` or `type`.
- `copy()` returns a deep copy.
- `equal(other)`, `flat_string()` and `checksum()` compare nodes by content.
  `checksum()` is the SHA-256 of `flat_string()`.
- `purl()` returns the package URL identifier. It returns an empty string for
  file nodes.
- `hashes_match(hashes)` and `add_hash(algo, value)` work with the node's hashes.
- `diff(other)` returns a `NodeDiff` with `added` and `removed` nodes and a
  `diff_count`. It returns `None` when nothing changed.

The lower-level helpers `diff_values`, `diff_dates`, `diff_map`, `diff_slice`
and `diff_list` live in `protobom.sbom.diff`.

## Node lists

`NodeList` (in `protobom.sbom.nodelist`) has these methods:

- `union(other)` and `intersect(other)` return new lists. `add(other)` merges
  in place.
- `remove_nodes(ids)` drops nodes. `clean_edges()` removes dangling edges and
  destinations and merges edges that share a source and type.
- `get_node_by_id`, `get_nodes_by_name`, `get_nodes_by_identifier("purl", value)`,
  `get_edge_by_type` and `get_root_nodes` look things up.
- `index_nodes_by_hash()` and `index_nodes_by_purl()` build lookup indexes.
- `get_matching_node(node)` finds the single node that matches by hashes, and
  then by package URL. If the match is ambiguous it raises
  `MoreThanOneMatchError`.
- `copy()` and `equal(other)`.

## Identifiers and vocabularies

`protobom.sbom.identifiers.new_node_identifier("auto", "my package")` builds IDs
that are safe to use in both SPDX and CycloneDX. It falls back to a random UUID.

`protobom.sbom.enums` defines `HashAlgorithm`, `SoftwareIdentifierType`,
`Purpose`, `NodeType` and `ExternalReferenceType`, along with converters to and
from SPDX and CycloneDX labels, for example `HashAlgorithm.to_spdx()`,
`hash_algorithm_from_cdx("SHA-256")` and `software_identifier_type_from_string("cpe2.3")`.
`EdgeType.to_spdx2()`, `edge_type_from_spdx2()` and `edge_type_from_spdx()`
map relationship labels.

## Storage

`protobom.storage.filesystem.FileSystem(path=...)` stores each document as a
JSON file in a directory. The file name is the SHA-256 of the document ID.
`store` creates the directory if it does not exist. It refuses documents that
have no ID. It also refuses to overwrite an existing file when
`StoreOptions(no_clobber=True)` is passed. `retrieve(id)` reads a document back.

`protobom.storage.backend` defines the `StoreRetriever` protocol, the
`StoreOptions` and `RetrieveOptions` classes, and a `Fake` backend that returns
or raises whatever you program into it.

## Writing

`protobom.writer.writer.Writer` takes option functions from
`protobom.writer.writer_options`, such as `with_format`,
`with_render_options`, `with_serialize_options`, `with_format_options`,
`with_store_retriever` and `with_store_options`.

- `write_stream` and `write_file` (and their `*_with_options` variants) look up
  a serializer for the format and call its `serialize` and then its `render`.
- `store` and `store_with_options` hand the document to the storage backend.

Failures raise `WriterError`.

Serializers are any objects with the `Serializer` protocol's `serialize` and
`render` methods. Manage them with `register_serializer`,
`unregister_serializer` and `get_format_serializer`.

The default storage backend is a `FileSystem` with no path. Set its `path`, or
pass your own backend, before you call `store`.

## What this package does not do

- It ships no serializers for SPDX, CycloneDX or any other native format. The
  serializer registry starts empty. Writing fails until you register a
  serializer for the format you ask for.
- It cannot read native SBOM files.
- It has no graph-traversal helpers beyond the `NodeList` methods listed
  above. There is nothing to extract a node's dependency subgraph, its
  immediate siblings or its descendants to a given depth, nothing to filter
  nodes by package URL type, and nothing to attach a node or node list
  beneath an existing node.
- It has no command-line tool.