from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from .record import ImportReference, ResolvedSchemaRecord

LOGGER = logging.getLogger(__name__)


class ImportStrategy:
    """Protocol for turning a schema reference into schema text."""

    def resolve(
        self, namespace_uri: Optional[str], system_id: str
    ) -> Optional[str]:  # pragma: no cover - interface definition
        raise NotImplementedError


class FunctionImportStrategy(ImportStrategy):
    """Adapts a plain ``func(namespace_uri, system_id)`` into a strategy."""

    def __init__(self, func: Callable[[Optional[str], str], Optional[str]]) -> None:
        if not callable(func):
            raise ValueError("func must be callable")
        self._func = func

    def resolve(self, namespace_uri: Optional[str], system_id: str) -> Optional[str]:
        return self._func(namespace_uri, system_id)


StrategyLike = Union[ImportStrategy, Callable[[Optional[str], str], Optional[str]]]


class SchemaResourceResolver:
    """Resolves schema imports through a pluggable strategy.

    Returns a :class:`ResolvedSchemaRecord` when the strategy produces
    content and ``None`` otherwise, which tells the engine to fall back to
    its own loading. Each call goes back to the strategy; nothing is cached.
    """

    def __init__(self, strategy: StrategyLike) -> None:
        if strategy is None:
            raise ValueError("strategy is required")
        if not isinstance(strategy, ImportStrategy):
            strategy = FunctionImportStrategy(strategy)
        self._strategy = strategy

    @property
    def strategy(self) -> ImportStrategy:
        return self._strategy

    def resolve_resource(
        self,
        type: Optional[str],
        namespace_uri: Optional[str],
        public_id: Optional[str],
        system_id: Optional[str],
        base_uri: Optional[str],
    ) -> Optional[ResolvedSchemaRecord]:
        if system_id is None or not system_id.strip():
            return None

        contents = self._strategy.resolve(namespace_uri, system_id)
        if contents is None:
            LOGGER.debug(
                "Schema reference left unresolved",
                extra={"systemId": system_id, "namespaceUri": namespace_uri},
            )
            return None

        return ResolvedSchemaRecord(
            system_id=system_id,
            public_id=public_id,
            base_uri=base_uri,
            string_data=contents,
        )

    def resolve_reference(self, reference: ImportReference) -> Optional[ResolvedSchemaRecord]:
        return self.resolve_resource(
            reference.type,
            reference.namespace_uri,
            reference.public_id,
            reference.system_id,
            reference.base_uri,
        )
