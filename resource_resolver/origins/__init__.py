from .base import ResourceOrigin
from .bundled import BundledResourceOrigin
from .file import FileSystemOrigin
from .remote import RemoteUrlOrigin

__all__ = [
    "ResourceOrigin",
    "BundledResourceOrigin",
    "FileSystemOrigin",
    "RemoteUrlOrigin",
]
