"""Find a named resource across several origins in priority order.

The locator walks a search order of :class:`OriginKind` values and returns a
handle from the first origin that can open the resource. Not finding a
resource is a normal outcome and is reported as ``None``; only a blank
resource path is treated as a caller error.

Typical usage:

    from resource_resolver import OriginKind, ResourceLocator

    locator = ResourceLocator()
    handle = locator.find("schemas/base.xsd")
    if handle is not None:
        with handle:
            data = handle.read()

    # Try a URL first, then the filesystem
    handle = locator.find(
        "https://example.org/base.xsd",
        [OriginKind.REMOTE_URL, OriginKind.FILE_SYSTEM],
    )
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, Iterable, Optional, Sequence, Tuple

from .constants import DEFAULT_SEARCH_ORDER, SEARCH_ORDER_ENV, OriginKind
from .exceptions import ConfigurationError
from .origins import (
    BundledResourceOrigin,
    FileSystemOrigin,
    RemoteUrlOrigin,
    ResourceOrigin,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class ResourceHandle:
    """An open byte stream together with the origin that produced it.

    The caller owns the stream and is responsible for closing it, either
    directly or by using the handle as a context manager.
    """

    stream: BinaryIO
    origin: OriginKind
    location: str

    def read(self, size: Optional[int] = None) -> bytes:
        if size is None:
            return self.stream.read()
        return self.stream.read(size)

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "ResourceHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def parse_search_order(text: Optional[str]) -> Tuple[OriginKind, ...]:
    """Parse a comma-separated list of origin names such as ``"remote_url,file_system"``."""
    if not text or not text.strip():
        return ()

    order = []
    for name in text.split(","):
        name = name.strip().lower()
        if not name:
            continue
        try:
            order.append(OriginKind(name))
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in OriginKind)
            raise ConfigurationError(
                f"Unknown origin '{name}' in search order; expected one of: {choices}."
            ) from exc
    return tuple(order)


def _require_path(resource_path: str) -> None:
    if not isinstance(resource_path, str):
        raise ValueError("'resource_path' must be a string.")
    if not resource_path.strip():
        raise ValueError("'resource_path' is a blank string.")


class ResourceLocator:
    """Probes origins in order and returns the first resource found.

    Instances hold only immutable configuration and may be shared between
    threads; each returned stream belongs to the caller that received it.
    """

    def __init__(
        self,
        default_search_order: Optional[Iterable[OriginKind]] = None,
        origins: Optional[Iterable[ResourceOrigin]] = None,
    ) -> None:
        order = tuple(default_search_order or ())
        self._default_search_order: Tuple[OriginKind, ...] = order or DEFAULT_SEARCH_ORDER

        registered: Dict[OriginKind, ResourceOrigin] = {
            OriginKind.FILE_SYSTEM: FileSystemOrigin(),
            OriginKind.BUNDLED_RESOURCE: BundledResourceOrigin(),
            OriginKind.REMOTE_URL: RemoteUrlOrigin(),
        }
        for origin in origins or ():
            registered[origin.kind] = origin
        self._origins = registered

    @classmethod
    def from_env(cls, environ=None, **kwargs) -> "ResourceLocator":
        """Build a locator whose default search order comes from ``RESOURCE_SEARCH_ORDER``."""
        environ = os.environ if environ is None else environ
        order = parse_search_order(environ.get(SEARCH_ORDER_ENV))
        return cls(default_search_order=order or None, **kwargs)

    @property
    def default_search_order(self) -> Tuple[OriginKind, ...]:
        return self._default_search_order

    def find(
        self,
        resource_path: str,
        search_order: Optional[Sequence[OriginKind]] = None,
        reference: Any = None,
    ) -> Optional[ResourceHandle]:
        """Open ``resource_path`` from the first origin in ``search_order`` that has it.

        An empty or missing ``search_order`` means the locator's default
        order. ``reference`` scopes bundled-resource lookup to the package of
        the given module, class or object. Returns ``None`` when no origin
        has the resource.
        """

        _require_path(resource_path)
        order = tuple(search_order or ()) or self._default_search_order

        for kind in order:
            stream = self._origins[kind].open(resource_path, reference)
            if stream is not None:
                LOGGER.debug(
                    "Resource found",
                    extra={"resourcePath": resource_path, "origin": kind.value},
                )
                return ResourceHandle(stream=stream, origin=kind, location=resource_path)

        LOGGER.debug(
            "Resource not found in any origin",
            extra={"resourcePath": resource_path, "searchOrder": [kind.value for kind in order]},
        )
        return None

    def open_bundled(self, resource_path: str, reference: Any = None) -> Optional[BinaryIO]:
        """Open a bundled resource only, skipping every other origin."""
        _require_path(resource_path)
        return self._bundled().open(resource_path, reference)

    def locate_bundled(self, resource_path: str, reference: Any = None) -> Optional[str]:
        """Return a URI for a bundled resource only, or ``None``."""
        _require_path(resource_path)
        return self._bundled().locate(resource_path, reference)

    def _bundled(self) -> BundledResourceOrigin:
        origin = self._origins[OriginKind.BUNDLED_RESOURCE]
        if not isinstance(origin, BundledResourceOrigin):
            raise TypeError("Bundled lookups require a BundledResourceOrigin.")
        return origin
