from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

from ..constants import DEFAULT_ENCODING, OriginKind
from ..locator import ResourceLocator
from .resolver import ImportStrategy

LOGGER = logging.getLogger(__name__)


def _is_url(value: str) -> bool:
    return len(urlparse(value).scheme) > 1


class BaseDirectoryStrategy(ImportStrategy):
    """Reads referenced schemas relative to a fixed base directory.

    A file that cannot be read is logged at WARNING and reported as
    unresolved so the engine can fall back to its own loading.
    """

    def __init__(self, base_dir: Union[str, os.PathLike], encoding: str = DEFAULT_ENCODING) -> None:
        self._base_dir = Path(base_dir)
        self._encoding = encoding

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, namespace_uri: Optional[str], system_id: str) -> Optional[str]:
        path = system_id
        try:
            path = self.path_for(system_id)
            return path.read_text(encoding=self._encoding)
        except (OSError, ValueError) as exc:
            LOGGER.warning(
                "Couldn't load file: %s (%s)",
                path,
                exc,
                extra={"path": str(path), "systemId": system_id, "namespaceUri": namespace_uri},
            )
            return None

    def path_for(self, system_id: str) -> Path:
        parsed = urlparse(system_id)
        if parsed.scheme == "file":
            system_id = url2pathname(parsed.path)
        return self._base_dir / system_id


class LocatorImportStrategy(ImportStrategy):
    """Finds referenced schemas with a :class:`ResourceLocator`.

    ``base`` may be a directory path, a package-relative prefix or a URL; it
    is treated as a directory and the system id is joined onto it. System ids
    that are already URLs are used unchanged.
    """

    def __init__(
        self,
        locator: Optional[ResourceLocator] = None,
        base: Optional[str] = None,
        search_order: Optional[Sequence[OriginKind]] = None,
        reference: Any = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._locator = locator or ResourceLocator()
        self._base = base
        self._search_order = tuple(search_order or ())
        self._reference = reference
        self._encoding = encoding

    def resolve(self, namespace_uri: Optional[str], system_id: str) -> Optional[str]:
        try:
            target = self.target_for(system_id)
        except ValueError as exc:
            LOGGER.warning(
                "Couldn't interpret reference: %s (%s)",
                system_id,
                exc,
                extra={"systemId": system_id, "namespaceUri": namespace_uri},
            )
            return None
        handle = self._locator.find(target, self._search_order, self._reference)
        if handle is None:
            return None
        try:
            with handle:
                return handle.read().decode(self._encoding)
        except (OSError, ValueError) as exc:
            LOGGER.warning(
                "Couldn't read resource: %s (%s)",
                target,
                exc,
                extra={"path": target, "origin": handle.origin.value, "namespaceUri": namespace_uri},
            )
            return None

    def target_for(self, system_id: str) -> str:
        if not self._base or _is_url(system_id):
            return system_id
        if _is_url(self._base):
            base = self._base if self._base.endswith("/") else self._base + "/"
            return urljoin(base, system_id)
        return os.path.join(self._base, system_id)
