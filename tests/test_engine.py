import tempfile
import unittest
from pathlib import Path

from lxml import etree

from resource_resolver import SchemaLoadError, SchemaValidationError
from resource_resolver.schema import (
    BaseDirectoryStrategy,
    SchemaResourceResolver,
    load_schema,
    validate,
    validate_files,
)

MAIN_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:include schemaLocation="{location}"/>
  <xs:element name="order" type="OrderType"/>
</xs:schema>
"""

INCLUDED_XSD = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:complexType name="OrderType">
    <xs:sequence>
      <xs:element name="quantity" type="xs:positiveInteger"/>
    </xs:sequence>
  </xs:complexType>
</xs:schema>
"""

LATIN1_XSD = """<?xml version="1.0" encoding="ISO-8859-1"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:element name="label">
    <xs:simpleType>
      <xs:restriction base="xs:string">
        <xs:enumeration value="caf\u00e9"/>
      </xs:restriction>
    </xs:simpleType>
  </xs:element>
</xs:schema>
"""

LABEL_XSD = b"""<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">
  <xs:include schemaLocation="labels.xsd"/>
</xs:schema>
"""

VALID_ORDER = b"<order><quantity>3</quantity></order>"
INVALID_ORDER = b"<order><quantity>none</quantity></order>"


class SchemaEngineTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

        self.schema_dir = self.root / "schemas"
        self.schema_dir.mkdir()
        self.schema_path = self.schema_dir / "order.xsd"
        self.schema_path.write_text(MAIN_XSD.format(location="included.xsd"), encoding="utf-8")
        (self.schema_dir / "included.xsd").write_text(INCLUDED_XSD, encoding="utf-8")

        self.valid_path = self.root / "valid.xml"
        self.valid_path.write_bytes(VALID_ORDER)
        self.invalid_path = self.root / "invalid.xml"
        self.invalid_path.write_bytes(INVALID_ORDER)

    def test_validate_files_accepts_valid_document(self):
        validate_files(self.valid_path, self.schema_path)

    def test_validate_files_rejects_invalid_document(self):
        with self.assertRaises(SchemaValidationError) as ctx:
            validate_files(self.invalid_path, str(self.schema_path))
        self.assertTrue(ctx.exception.errors)
        self.assertIn("quantity", ctx.exception.errors[0])

    def test_include_served_only_by_strategy(self):
        requested = []

        def serve(namespace_uri, system_id):
            requested.append(system_id)
            if system_id.endswith("virtual.xsd"):
                return INCLUDED_XSD
            return None

        schema_bytes = MAIN_XSD.format(location="virtual.xsd").encode("utf-8")
        resolver = SchemaResourceResolver(serve)

        schema = load_schema(schema_bytes, resolver)

        self.assertTrue(any(system_id.endswith("virtual.xsd") for system_id in requested))
        validate(VALID_ORDER, schema)
        with self.assertRaises(SchemaValidationError):
            validate(INVALID_ORDER, schema)

    def test_unresolved_include_falls_back_to_engine_loading(self):
        resolver = SchemaResourceResolver(lambda namespace_uri, system_id: None)
        validate(self.valid_path, self.schema_path, resolver)

    def test_missing_include_without_fallback_fails_to_load(self):
        empty_dir = self.root / "empty"
        empty_dir.mkdir()
        resolver = SchemaResourceResolver(BaseDirectoryStrategy(empty_dir))
        schema_bytes = MAIN_XSD.format(location="nowhere-to-be-found.xsd").encode("utf-8")

        with self.assertLogs("resource_resolver.schema.strategies", level="WARNING"):
            with self.assertRaises(SchemaLoadError):
                load_schema(schema_bytes, resolver)

    def test_parsed_schema_tree_is_reparsed_with_resolver(self):
        tree = etree.parse(str(self.schema_path))
        resolver = SchemaResourceResolver(BaseDirectoryStrategy(self.schema_dir))
        validate(etree.fromstring(VALID_ORDER), tree, resolver)

    def test_include_decoded_with_declared_encoding(self):
        latin_dir = self.root / "latin"
        latin_dir.mkdir()
        (latin_dir / "labels.xsd").write_bytes(LATIN1_XSD.encode("iso-8859-1"))
        resolver = SchemaResourceResolver(BaseDirectoryStrategy(latin_dir, encoding="iso-8859-1"))

        schema = load_schema(LABEL_XSD, resolver)

        validate("<label>caf\u00e9</label>".encode("utf-8"), schema)
        with self.assertRaises(SchemaValidationError):
            validate("<label>cafe</label>".encode("utf-8"), schema)

    def test_missing_document_raises_validation_error(self):
        with self.assertRaises(SchemaValidationError) as ctx:
            validate(self.root / "absent.xml", self.schema_path)
        self.assertIn("Unable to read document", str(ctx.exception))

    def test_malformed_schema_raises_load_error(self):
        with self.assertRaises(SchemaLoadError):
            load_schema(b"<xs:schema")
        with self.assertRaises(SchemaLoadError):
            load_schema(self.root / "missing.xsd")

    def test_malformed_document_raises_validation_error(self):
        with self.assertRaises(SchemaValidationError):
            validate(b"<order><quantity>", self.schema_path)


if __name__ == "__main__":
    unittest.main()
