from .engine import LxmlSchemaResolver, load_schema, validate, validate_files
from .record import ImportReference, ResolvedSchemaRecord
from .resolver import FunctionImportStrategy, ImportStrategy, SchemaResourceResolver
from .strategies import BaseDirectoryStrategy, LocatorImportStrategy

__all__ = [
    "BaseDirectoryStrategy",
    "FunctionImportStrategy",
    "ImportReference",
    "ImportStrategy",
    "LocatorImportStrategy",
    "LxmlSchemaResolver",
    "ResolvedSchemaRecord",
    "SchemaResourceResolver",
    "load_schema",
    "validate",
    "validate_files",
]
