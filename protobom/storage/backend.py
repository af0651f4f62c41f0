"""Storage backend interface, its options and a programmable fake backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from protobom.sbom.document import Document


@dataclass
class StoreOptions:
    """Options passed to a backend when storing a document."""

    backend_options: Any = None
    no_clobber: bool = False


@dataclass
class RetrieveOptions:
    """Options passed to a backend when retrieving a document."""

    backend_options: Any = None


@runtime_checkable
class StoreRetriever(Protocol):
    """A backend that can persist documents and read them back by ID."""

    def store(self, doc: Document, opts: StoreOptions | None = None) -> None:
        """Persist ``doc``; raise on failure."""
        ...

    def retrieve(self, id: str, opts: RetrieveOptions | None = None) -> Document:
        """Return the document stored under ``id``; raise on failure."""
        ...


@dataclass
class Fake:
    """A backend that stores nothing and answers with preprogrammed results."""

    store_returns: Exception | None = None
    retrieve_document: Document | None = None
    retrieve_error: Exception | None = None

    def store(self, doc: Document, opts: StoreOptions | None = None) -> None:
        """Raise the programmed store error, if any."""
        if self.store_returns is not None:
            raise self.store_returns

    def retrieve(self, id: str, opts: RetrieveOptions | None = None) -> Document | None:
        """Return the programmed document, or raise the programmed error."""
        if self.retrieve_error is not None:
            raise self.retrieve_error
        return self.retrieve_document