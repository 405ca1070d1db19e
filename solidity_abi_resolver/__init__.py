"""Render contract ABI JSON as Solidity interfaces during import resolution."""

from .core.models import AbiFormatError, load_abi, parse_abi
from .generator.interface import (
    Fallback,
    Generated,
    WriterOptions,
    describe_interface,
    try_describe_interface,
)
from .sources.abi_source import AbiSource, declared_name_from_path
from .sources.fs_source import FSSource

__all__ = [
    "AbiFormatError",
    "AbiSource",
    "FSSource",
    "Fallback",
    "Generated",
    "WriterOptions",
    "declared_name_from_path",
    "describe_interface",
    "load_abi",
    "parse_abi",
    "try_describe_interface",
]
