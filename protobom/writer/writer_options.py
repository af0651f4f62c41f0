"""Options of the SBOM writer and the functions that configure a writer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from protobom.storage.backend import StoreOptions, StoreRetriever

if TYPE_CHECKING:
    from protobom.writer.writer import Writer

WriterOption = Callable[["Writer"], None]


@dataclass
class RenderOptions:
    """Options controlling how a native document is rendered."""

    indent: int = 0


@dataclass
class SerializeOptions:
    """Options controlling how a document is serialized to a native format."""


def _options_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    cls = type(key)
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass
class Options:
    """The full set of options a writer works with."""

    format: str = ""
    render_options: RenderOptions | None = None
    serialize_options: SerializeOptions | None = None
    store_options: StoreOptions | None = None
    _format_options: dict[str, Any] = field(default_factory=dict, repr=False)

    def get_format_options(self, key: Any) -> Any:
        """Return the format options stored for ``key`` (a string or a serializer)."""
        return self._format_options.get(_options_key(key))

    def set_format_options(self, key: Any, opts: Any) -> None:
        """Store format options under ``key``: a string, or a serializer keyed by its type."""
        name = _options_key(key)
        if not name:
            return
        self._format_options[name] = opts


def with_render_options(ro: RenderOptions | None) -> WriterOption:
    """Set the writer's render options, unless ``ro`` is None."""

    def apply(writer: Writer) -> None:
        if ro is not None:
            writer.options.render_options = ro

    return apply


def with_serialize_options(so: SerializeOptions | None) -> WriterOption:
    """Set the writer's serialize options, unless ``so`` is None."""

    def apply(writer: Writer) -> None:
        if so is not None:
            writer.options.serialize_options = so

    return apply


def with_format_options(driver_key: Any, opts: Any) -> WriterOption:
    """Store format-specific options for a serializer or a named key."""

    def apply(writer: Writer) -> None:
        writer.options.set_format_options(driver_key, opts)

    return apply


def with_format(fmt: str) -> WriterOption:
    """Set the format the writer produces."""

    def apply(writer: Writer) -> None:
        writer.options.format = fmt

    return apply


def with_store_retriever(sb: StoreRetriever | None) -> WriterOption:
    """Set the writer's storage backend, unless ``sb`` is None."""

    def apply(writer: Writer) -> None:
        if sb is not None:
            writer.storage = sb

    return apply


def with_store_options(so: StoreOptions | None) -> WriterOption:
    """Set the writer's store options, unless ``so`` is None."""

    def apply(writer: Writer) -> None:
        if so is not None:
            writer.options.store_options = so

    return apply