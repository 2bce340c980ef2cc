from __future__ import annotations

import importlib.util
import logging
import os
import sys
import types
from pathlib import Path
from typing import Any, BinaryIO, List, Optional

from ..constants import OriginKind
from .base import ResourceOrigin

LOGGER = logging.getLogger(__name__)


class BundledResourceOrigin(ResourceOrigin):
    """Opens resources shipped inside importable packages.

    With a ``reference`` (a module, a package name, a class or an instance)
    the resource path is taken relative to the package that owns the
    reference. Without one, the first path segment names a top-level package
    (``"mypkg/schemas/base.xsd"``); when no such package can be found the
    directories on ``sys.path`` are searched for the relative path instead.
    """

    kind = OriginKind.BUNDLED_RESOURCE

    def open(self, resource_path: str, reference: Any = None) -> Optional[BinaryIO]:
        target = self.find(resource_path, reference)
        if target is None:
            return None
        return target.open("rb")

    def locate(self, resource_path: str, reference: Any = None) -> Optional[str]:
        """Return a URI for the bundled resource, or ``None``."""
        target = self.find(resource_path, reference)
        if target is None:
            return None
        return target.resolve().as_uri()

    def find(self, resource_path: str, reference: Any = None):
        segments = _split(resource_path)
        if not segments:
            return None

        if reference is not None:
            roots = _reference_roots(reference)
            if not roots:
                LOGGER.debug("Reference has no package", extra={"reference": repr(reference)})
            return _first_existing(roots, segments)

        if len(segments) > 1 and segments[0].isidentifier():
            target = _first_existing(_package_roots(segments[0]), segments[1:])
            if target is not None:
                return target

        for entry in sys.path:
            base = Path(entry or os.curdir)
            if not base.is_dir():
                continue
            target = _existing_file(base, segments)
            if target is not None:
                return target

        LOGGER.debug("No bundled resource", extra={"resourcePath": resource_path})
        return None


def _split(resource_path: str) -> List[str]:
    segments = [part for part in resource_path.replace("\\", "/").split("/") if part not in ("", ".")]
    if ".." in segments:
        return []
    return segments


def _existing_file(root, segments: List[str]):
    target = root
    for segment in segments:
        target = target.joinpath(segment)
    try:
        if target.is_file():
            return target
    except OSError:
        return None
    return None


def _first_existing(roots, segments: List[str]):
    for root in roots:
        target = _existing_file(root, segments)
        if target is not None:
            return target
    return None


def _package_roots(package_name: str) -> List[Path]:
    # Locate the package without importing it; lookups never run package code.
    try:
        spec = importlib.util.find_spec(package_name)
    except (ImportError, ValueError):
        return []
    except Exception:  # noqa: BLE001 - a parent package failed while importing
        LOGGER.debug("Package could not be located", extra={"package": package_name}, exc_info=True)
        return []
    if spec is None or spec.submodule_search_locations is None:
        return []
    return [Path(location) for location in spec.submodule_search_locations]


def _module_roots(module: types.ModuleType) -> List[Path]:
    locations = getattr(module, "__path__", None)
    if locations is not None:
        return [Path(location) for location in locations]
    if module.__package__:
        package = sys.modules.get(module.__package__)
        if package is not None:
            return _module_roots(package)
        return _package_roots(module.__package__)
    module_file = getattr(module, "__file__", None)
    if module_file:
        return [Path(module_file).resolve().parent]
    return []


def _reference_roots(reference: Any) -> List[Path]:
    if isinstance(reference, str):
        module = sys.modules.get(reference)
        if module is None:
            return _package_roots(reference)
        return _module_roots(module)
    if isinstance(reference, types.ModuleType):
        return _module_roots(reference)

    module_name = getattr(reference, "__module__", None) or type(reference).__module__
    module = sys.modules.get(module_name)
    if module is None:
        return []
    return _module_roots(module)
