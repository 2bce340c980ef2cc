from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional

from ..constants import OriginKind


class ResourceOrigin(ABC):
    """Abstract interface for opening a resource from one kind of location.

    Implementations return ``None`` when the resource is not present at their
    location. Not being found is an expected outcome of probing and is never
    raised as an error.
    """

    kind: OriginKind

    @abstractmethod
    def open(self, resource_path: str, reference: Any = None) -> Optional[BinaryIO]:
        """Open ``resource_path`` as a binary stream, or return ``None``."""
