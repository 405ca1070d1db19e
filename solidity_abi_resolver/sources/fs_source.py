"""Filesystem-backed import source."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterator, Optional

from ..core.source_base import Resolution, ResolverSource, SourceError
from .registry import register_source

logger = logging.getLogger(__name__)


class FSSource(ResolverSource):
    """Read imports straight from disk."""

    name = "fs"

    def _iter_candidates(self, import_path: str, imported_from: str) -> Iterator[Path]:
        path = Path(import_path)
        if path.is_absolute():
            yield path
            return
        yield Path(self.working_directory) / path
        if imported_from:
            yield Path(self.working_directory) / Path(imported_from).parent / path

    async def resolve(self, import_path: str, imported_from: str = "") -> Resolution:
        for candidate in self._iter_candidates(import_path, imported_from):
            body = await asyncio.to_thread(self._read_file, candidate)
            if body is not None:
                return Resolution(file_path=str(candidate.resolve()), body=body)
        logger.debug("No file found for %s (imported from %r)", import_path, imported_from)
        return Resolution.empty()

    @staticmethod
    def _read_file(path: Path) -> Optional[str]:
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise SourceError(f"Failed to read {path}: {exc}") from exc


register_source(
    FSSource.name,
    FSSource,
    description="Plain files relative to the working directory or importer.",
    position=90,
    override=True,
)
