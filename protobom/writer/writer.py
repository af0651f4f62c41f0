"""Writing SBOM documents to native formats and to a storage backend."""

from __future__ import annotations

import os
import threading
from typing import Any, Protocol

from protobom.sbom.document import Document
from protobom.storage.backend import StoreOptions, StoreRetriever
from protobom.storage.filesystem import FileSystem
from protobom.writer.writer_options import (
    Options,
    RenderOptions,
    SerializeOptions,
    WriterOption,
)


class Serializer(Protocol):
    """Turns a document into a native SBOM format and renders it to a stream."""

    def serialize(
        self, bom: Document, options: SerializeOptions, format_options: Any
    ) -> Any:
        """Return the native representation of ``bom``."""
        ...

    def render(
        self, native_document: Any, stream: Any, options: RenderOptions, format_options: Any
    ) -> None:
        """Write ``native_document`` to ``stream``."""
        ...


class WriterError(Exception):
    """Raised when a document cannot be written or stored."""


_serializers: dict[str, Serializer | None] = {}
_lock = threading.Lock()


def _default_options() -> Options:
    return Options(
        render_options=RenderOptions(indent=4),
        serialize_options=SerializeOptions(),
        store_options=StoreOptions(),
    )


def register_serializer(fmt: str, serializer: Serializer | None) -> None:
    """Register ``serializer`` for format ``fmt``, replacing any previous one."""
    with _lock:
        _serializers[fmt] = serializer


def unregister_serializer(fmt: str) -> None:
    """Remove the serializer registered for ``fmt``, if any."""
    with _lock:
        _serializers.pop(fmt, None)


def get_format_serializer(fmt: str) -> Serializer | None:
    """Return the serializer registered for ``fmt``.

    Raises ValueError without a format and LookupError for an unknown one.
    """
    if not fmt:
        raise ValueError("unable to find serializer, no format specified")
    with _lock:
        if fmt not in _serializers:
            raise LookupError(f"unable to find serializer for format {fmt}")
        return _serializers[fmt]


class Writer:
    """Writes documents in native formats and persists them to a backend."""

    def __init__(self, *opts: WriterOption) -> None:
        self.storage: StoreRetriever | None = FileSystem()
        self.options: Options = _default_options()
        for opt in opts:
            opt(self)

    def write_stream_with_options(
        self, bom: Document | None, stream: Any, options: Options
    ) -> None:
        """Serialize and render ``bom`` to ``stream`` using ``options``."""
        if bom is None:
            raise WriterError("unable to write sbom to stream, SBOM is nil")

        fmt = options.format or self.options.format
        try:
            serializer = get_format_serializer(fmt)
        except (LookupError, ValueError) as err:
            raise WriterError(f"getting serializer: {err}") from err
        if serializer is None:
            raise WriterError(f"getting serializer: no serializer registered for format {fmt}")

        defaults = _default_options()
        so = options.serialize_options or defaults.serialize_options
        format_options = options.get_format_options(serializer)
        try:
            native_document = serializer.serialize(bom, so, format_options)
        except Exception as err:
            raise WriterError(f"serializing SBOM to native format: {err}") from err

        ro = options.render_options or defaults.render_options
        try:
            serializer.render(native_document, stream, ro, format_options)
        except Exception as err:
            raise WriterError(f"writing rendered document to string: {err}") from err

    def write_stream(self, bom: Document | None, stream: Any) -> None:
        """Write ``bom`` to ``stream`` using the writer's own options."""
        self.write_stream_with_options(bom, stream, self.options)

    def write_file_with_options(
        self, bom: Document | None, path: str | os.PathLike[str], options: Options
    ) -> None:
        """Write ``bom`` to the file at ``path``, truncating it if it exists."""
        with open(path, "wb") as stream:
            self.write_stream_with_options(bom, stream, options)

    def write_file(self, bom: Document | None, path: str | os.PathLike[str]) -> None:
        """Write ``bom`` to the file at ``path`` using the writer's own options."""
        self.write_file_with_options(bom, path, self.options)

    def store(self, bom: Document | None) -> None:
        """Persist ``bom`` with the storage backend using the default options."""
        self.store_with_options(bom, _default_options())

    def store_with_options(self, bom: Document | None, options: Options) -> None:
        """Persist ``bom`` with the configured storage backend."""
        if bom is None:
            raise WriterError("writing document")
        if self.storage is None:
            raise WriterError("no storage backend configured")
        try:
            self.storage.store(bom, options.store_options)
        except Exception as err:
            raise WriterError(f"calling backend store: {err}") from err