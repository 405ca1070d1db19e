"""Solidity interface generation from contract ABIs."""

from .interface import (
    Fallback,
    Generated,
    GenerationResult,
    GeneratorError,
    SolidityInterfaceWriter,
    WriterOptions,
    describe_interface,
    render_interface,
    try_describe_interface,
)

__all__ = [
    "Fallback",
    "Generated",
    "GenerationResult",
    "GeneratorError",
    "SolidityInterfaceWriter",
    "WriterOptions",
    "describe_interface",
    "render_interface",
    "try_describe_interface",
]
