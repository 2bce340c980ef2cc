from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional, TextIO


@dataclass
class ImportReference:
    """An ``xs:import``/``xs:include`` reference raised while parsing a schema."""

    system_id: Optional[str]
    namespace_uri: Optional[str] = None
    public_id: Optional[str] = None
    base_uri: Optional[str] = None
    type: Optional[str] = None


@dataclass
class ResolvedSchemaRecord:
    """Resolved schema content in the shape a validation engine consumes.

    Only ``string_data`` and the identifiers are filled in by the resolver.
    The stream, encoding and certified-text fields exist so engines that
    look for them find their usual defaults.
    """

    system_id: str
    public_id: Optional[str]
    base_uri: Optional[str]
    string_data: str
    byte_stream: Optional[BinaryIO] = None
    character_stream: Optional[TextIO] = None
    encoding: Optional[str] = None
    certified_text: bool = False
