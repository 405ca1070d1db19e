"""Core abstractions for solidity_abi_resolver."""

from .models import (
    Abi,
    AbiEntry,
    AbiFormatError,
    AbiParameter,
    ConstructorEntry,
    EntryKind,
    EventEntry,
    FallbackEntry,
    FunctionEntry,
    GeneratorInput,
    Mutability,
    ReceiveEntry,
    load_abi,
    normalize_mutability,
    parse_abi,
)
from .source_base import Resolution, ResolverSource, SourceError

__all__ = [
    "Abi",
    "AbiEntry",
    "AbiFormatError",
    "AbiParameter",
    "ConstructorEntry",
    "EntryKind",
    "EventEntry",
    "FallbackEntry",
    "FunctionEntry",
    "GeneratorInput",
    "Mutability",
    "ReceiveEntry",
    "load_abi",
    "normalize_mutability",
    "parse_abi",
    "Resolution",
    "ResolverSource",
    "SourceError",
]
