"""Abstract import source definition for solidity_abi_resolver."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


class SourceError(RuntimeError):
    """Base error for import source failures."""


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one import path.

    Both fields are ``None`` when the source does not handle the path.
    """

    file_path: Optional[str] = None
    body: Optional[str] = None

    @classmethod
    def empty(cls) -> "Resolution":
        return cls()

    def __bool__(self) -> bool:
        return self.body is not None


class ResolverSource(ABC):
    """Common interface implemented by every link of the resolver chain."""

    name: str = "abstract"

    def __init__(self, working_directory: Optional[str] = None) -> None:
        self.working_directory = working_directory or os.getcwd()

    @abstractmethod
    async def resolve(self, import_path: str, imported_from: str = "") -> Resolution:
        """Return the file path and raw body for ``import_path``."""

    def require(self, import_path: str) -> Optional[Dict[str, Any]]:
        """Return a compiled artifact for ``import_path`` if this source has one."""
        return None

    def resolve_dependency_path(self, import_path: str, dependency_path: str) -> str:
        """Resolve ``dependency_path`` as seen from the file at ``import_path``."""
        dirname = os.path.dirname(import_path)
        return os.path.normpath(os.path.join(dirname, dependency_path))
