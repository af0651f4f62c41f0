"""Storage backends for persisting SBOM documents: a directory store and a fake."""