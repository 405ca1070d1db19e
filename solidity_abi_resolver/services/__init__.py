"""Service layer composing import sources."""

from .resolver import (
    ResolutionError,
    ResolvedImport,
    ResolverService,
    create_service,
    resolve_import,
)

__all__ = [
    "ResolutionError",
    "ResolvedImport",
    "ResolverService",
    "create_service",
    "resolve_import",
]
