"""Plug schema resolvers into lxml and validate documents against XSDs.

lxml consults the resolvers registered on the parser that read a schema
document whenever ``xs:import``/``xs:include`` pulls in another schema.
:class:`LxmlSchemaResolver` adapts a :class:`SchemaResourceResolver` to that
hook; returning ``None`` from it lets lxml load the reference itself.

Typical usage:

    from resource_resolver.schema import (
        BaseDirectoryStrategy, SchemaResourceResolver, validate,
    )

    resolver = SchemaResourceResolver(BaseDirectoryStrategy("/schemas"))
    validate("order.xml", "/schemas/order.xsd", resolver)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from ..constants import XML_SCHEMA_NS
from ..exceptions import SchemaLoadError, SchemaValidationError
from .resolver import SchemaResourceResolver
from .strategies import BaseDirectoryStrategy

LOGGER = logging.getLogger(__name__)

_XML_DECLARATION = re.compile(r"^\ufeff?\s*<\?xml[^>]*\?>")

Source = Union[str, os.PathLike, bytes, etree._Element, etree._ElementTree]


class LxmlSchemaResolver(etree.Resolver):
    """lxml resolver that serves schema references from a :class:`SchemaResourceResolver`."""

    def __init__(self, resolver: SchemaResourceResolver) -> None:
        super().__init__()
        self._resolver = resolver

    def resolve(self, system_url, public_id, context):
        record = self._resolver.resolve_resource(XML_SCHEMA_NS, None, public_id, system_url, None)
        if record is None:
            return None
        # The text is already decoded; its declared encoding no longer applies.
        data = _XML_DECLARATION.sub("", record.string_data, count=1).encode("utf-8")
        return self.resolve_string(data, context, base_url=record.system_id)


def _parser(resolver: Optional[SchemaResourceResolver]) -> etree.XMLParser:
    parser = etree.XMLParser()
    if resolver is not None:
        parser.resolvers.add(LxmlSchemaResolver(resolver))
    return parser


def _parse(source: Source, parser: etree.XMLParser) -> etree._ElementTree:
    if isinstance(source, etree._Element):
        source = source.getroottree()
    if isinstance(source, etree._ElementTree):
        # Re-read so the parser's resolvers see any references.
        return etree.ElementTree(
            etree.fromstring(etree.tostring(source), parser, base_url=source.docinfo.URL)
        )
    if isinstance(source, bytes):
        return etree.ElementTree(etree.fromstring(source, parser))
    return etree.parse(os.fspath(source), parser)


def load_schema(source: Source, resolver: Optional[SchemaResourceResolver] = None) -> etree.XMLSchema:
    """Compile an XML schema, resolving its imports through ``resolver`` when given."""
    try:
        document = _parse(source, _parser(resolver))
        return etree.XMLSchema(document)
    except (etree.LxmlError, OSError) as exc:
        raise SchemaLoadError(f"Unable to load schema: {exc}") from exc


def validate(
    data: Source,
    schema: Union[Source, etree.XMLSchema],
    resolver: Optional[SchemaResourceResolver] = None,
) -> None:
    """Validate ``data`` against ``schema``.

    Raises :class:`SchemaValidationError` when the data is not well formed or
    does not satisfy the schema, and :class:`SchemaLoadError` when the schema
    itself cannot be compiled.
    """

    xml_schema = schema if isinstance(schema, etree.XMLSchema) else load_schema(schema, resolver)

    try:
        document = _parse(data, etree.XMLParser())
    except etree.XMLSyntaxError as exc:
        raise SchemaValidationError(f"Document is not well-formed: {exc}", [str(exc)]) from exc
    except OSError as exc:
        raise SchemaValidationError(f"Unable to read document: {exc}", [str(exc)]) from exc

    if not xml_schema.validate(document):
        errors: List[str] = [str(entry) for entry in xml_schema.error_log]
        LOGGER.info("Document failed schema validation", extra={"errorCount": len(errors)})
        first = errors[0] if errors else "unknown error"
        raise SchemaValidationError(f"Document does not satisfy schema: {first}", errors)


def validate_files(data_path: Union[str, os.PathLike], schema_path: Union[str, os.PathLike]) -> None:
    """Validate a data file against a schema file, resolving imports next to the schema."""
    schema_path = Path(schema_path)
    resolver = SchemaResourceResolver(BaseDirectoryStrategy(schema_path.parent))
    validate(data_path, schema_path, resolver)
