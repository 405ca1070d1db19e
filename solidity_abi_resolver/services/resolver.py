"""High-level import resolution over a chain of sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..core.source_base import Resolution, ResolverSource, SourceError
from ..sources import default_source_names, resolve_source

logger = logging.getLogger(__name__)


class ResolutionError(RuntimeError):
    """Raised when an import cannot be resolved by any source."""


@dataclass
class ResolvedImport:
    """Serializable result of a chain lookup."""

    file_path: str
    body: str
    source: str

    def as_dict(self) -> Dict[str, str]:
        return {"filePath": self.file_path, "body": self.body, "source": self.source}


class ResolverService:
    """Try each configured source in order until one resolves the import."""

    def __init__(
        self,
        working_directory: Optional[str] = None,
        *,
        source_names: Optional[Sequence[str]] = None,
        source_kwargs: Optional[Dict[str, Dict[str, object]]] = None,
    ) -> None:
        self.working_directory = working_directory
        self.source_names = tuple(source_names or default_source_names())
        self.source_kwargs = source_kwargs or {}
        self._sources: Optional[List[ResolverSource]] = None

    def _ensure_sources(self) -> List[ResolverSource]:
        if self._sources is None:
            sources = []
            for name in self.source_names:
                try:
                    registration = resolve_source(name)
                except KeyError as exc:
                    raise ResolutionError(f"Source {name} is not registered") from exc
                kwargs = self.source_kwargs.get(name, {})
                try:
                    sources.append(registration.factory(self.working_directory, **kwargs))
                except TypeError as exc:
                    raise ResolutionError(
                        f"Source {name} does not accept provided parameters: {exc}"
                    ) from exc
            self._sources = sources
        return self._sources

    @property
    def sources(self) -> List[ResolverSource]:
        return list(self._ensure_sources())

    async def resolve(self, import_path: str, imported_from: str = "") -> ResolvedImport:
        """Return the first resolution any source produces for ``import_path``."""
        for source in self._ensure_sources():
            try:
                resolution: Resolution = await source.resolve(import_path, imported_from)
            except SourceError as exc:
                raise ResolutionError(str(exc)) from exc
            if resolution and resolution.file_path is not None:
                logger.debug("Resolved %s via %s", import_path, source.name)
                return ResolvedImport(
                    file_path=resolution.file_path,
                    body=resolution.body or "",
                    source=source.name,
                )

        message = f"Could not find {import_path} from any sources"
        if imported_from:
            message += f"; imported from {imported_from}"
        raise ResolutionError(message)


def create_service(
    working_directory: Optional[str] = None,
    *,
    source_names: Optional[Sequence[str]] = None,
    source_kwargs: Optional[Dict[str, Dict[str, object]]] = None,
) -> ResolverService:
    """Helper to instantiate a ResolverService."""
    return ResolverService(
        working_directory,
        source_names=source_names,
        source_kwargs=source_kwargs,
    )


async def resolve_import(
    import_path: str,
    imported_from: str = "",
    *,
    working_directory: Optional[str] = None,
    source_names: Optional[Sequence[str]] = None,
) -> ResolvedImport:
    """One-shot helper mirroring the ResolverService API."""
    service = create_service(working_directory, source_names=source_names)
    return await service.resolve(import_path, imported_from)
