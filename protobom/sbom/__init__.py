"""SBOM graph types: nodes, edges, node lists, documents, diffing and vocabularies."""