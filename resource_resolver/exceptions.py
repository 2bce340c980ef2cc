class ResourceResolutionError(Exception):
    """Base class for resource resolution errors."""


class ConfigurationError(ResourceResolutionError):
    """Raised when a search order or other setting cannot be interpreted."""


class SchemaLoadError(ResourceResolutionError):
    """Raised when a schema document cannot be parsed or compiled."""


class SchemaValidationError(ResourceResolutionError):
    """Raised when an XML document does not satisfy its schema."""

    def __init__(self, message: str, errors=None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])
