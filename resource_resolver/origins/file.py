from __future__ import annotations

import logging
from typing import Any, BinaryIO, Optional

from ..constants import OriginKind
from .base import ResourceOrigin

LOGGER = logging.getLogger(__name__)


class FileSystemOrigin(ResourceOrigin):
    """Opens resources from the local filesystem using plain paths."""

    kind = OriginKind.FILE_SYSTEM

    def open(self, resource_path: str, reference: Any = None) -> Optional[BinaryIO]:
        # Anything that stops the file being opened, including permissions,
        # counts as not found here.
        try:
            return open(resource_path, "rb")
        except (OSError, ValueError) as exc:
            LOGGER.debug(
                "File could not be opened",
                extra={"resourcePath": resource_path, "error": str(exc)},
            )
            return None
