"""Import source implementations and registry."""

from .registry import (
    SOURCE_REGISTRY,
    SourceFactory,
    SourceRegistration,
    default_source_names,
    register_source,
    resolve_source,
)

__all__ = [
    "SOURCE_REGISTRY",
    "SourceFactory",
    "SourceRegistration",
    "default_source_names",
    "register_source",
    "resolve_source",
]

# Ensure default sources are registered on import.
from . import fs_source  # noqa: F401,E402
from . import abi_source  # noqa: F401,E402
