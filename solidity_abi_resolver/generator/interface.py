"""Render contract ABIs as Solidity interface source."""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Union

from ..core.models import (
    Abi,
    AbiEntry,
    AbiParameter,
    EntryKind,
    EventEntry,
    FallbackEntry,
    FunctionEntry,
    GeneratorInput,
    Mutability,
    ReceiveEntry,
    load_abi,
    parse_abi,
)

logger = logging.getLogger(__name__)


class GeneratorError(RuntimeError):
    """Raised when an entry reaches a writer that cannot render it."""


@dataclass(frozen=True)
class WriterOptions:
    """Knobs for the emitted interface source."""

    license_identifier: str = "UNLICENSED"
    pragma: str = ">=0.5.0 <0.8.0"
    indent_width: int = 2
    # Events are left out until interface event rendering is switched on.
    render_events: bool = False

    def omits(self, kind: EntryKind) -> bool:
        if kind is EntryKind.CONSTRUCTOR:
            return True
        return kind is EntryKind.EVENT and not self.render_events


@dataclass(frozen=True)
class Generated:
    """Interface source produced from an ABI body."""

    source: str


@dataclass(frozen=True)
class Fallback:
    """The raw body should be served; ``reason`` says why."""

    reason: str


GenerationResult = Union[Generated, Fallback]


class SolidityInterfaceWriter:
    """Recursive writer emitting one Solidity interface per ABI."""

    def __init__(self, declared_name: str, options: Optional[WriterOptions] = None) -> None:
        self.declared_name = declared_name
        self.options = options or WriterOptions()
        self._writers: Dict[EntryKind, Callable[[Any], str]] = {
            EntryKind.FUNCTION: self.write_function,
            EntryKind.FALLBACK: self.write_fallback,
            EntryKind.RECEIVE: self.write_receive,
            EntryKind.EVENT: self.write_event,
        }

    def indent(self, text: str) -> str:
        return textwrap.indent(text, " " * self.options.indent_width)

    def write_abi(self, abi: Abi) -> str:
        members = [
            self.indent(f"{self.write_entry(entry)};")
            for entry in abi
            if not self.options.omits(entry.kind)
        ]
        return "\n".join(
            [
                f"//SPDX-License-Identifier: {self.options.license_identifier}",
                f"pragma solidity {self.options.pragma};",
                "",
                f"interface {self.declared_name} {{",
                "\n\n".join(members),
                "}",
            ]
        )

    def write_entry(self, entry: AbiEntry) -> str:
        if self.options.omits(entry.kind):
            raise GeneratorError(f"{entry.kind.value} entries are not part of an interface")
        return self._writers[entry.kind](entry)

    def write_modifiers(self, entry: Union[FunctionEntry, FallbackEntry, ReceiveEntry]) -> str:
        mutability = self.write_mutability(entry)
        # Interface members must be external.
        return "\n".join(token for token in ("external", mutability) if token)

    def write_mutability(self, entry: Union[FunctionEntry, FallbackEntry, ReceiveEntry]) -> str:
        if entry.mutability is Mutability.PAYABLE:
            return "payable"
        if entry.kind is not EntryKind.FUNCTION:
            return ""
        if entry.mutability is Mutability.VIEW:
            return "view"
        if entry.mutability is Mutability.PURE:
            return "pure"
        return ""

    def write_function(self, entry: FunctionEntry) -> str:
        lines = [
            f"function {entry.name}(",
            self.indent(self.write_inputs(entry.inputs)),
            ")",
            self.indent(self.write_modifiers(entry)),
        ]
        if entry.outputs:
            returns = ["returns (", self.indent(self.write_outputs(entry.outputs)), ")"]
            lines.extend(self.indent(line) for line in returns)
        return "\n".join(lines)

    def write_fallback(self, entry: FallbackEntry) -> str:
        return " ".join(["function ()", self.write_modifiers(entry)])

    def write_receive(self, entry: ReceiveEntry) -> str:
        return "receive () external payable"

    def write_event(self, entry: EventEntry) -> str:
        params = ",\n".join(
            self.write_parameter(
                parameter.with_type(f"{parameter.type} indexed")
                if parameter.indexed
                else parameter
            )
            for parameter in entry.inputs
        )
        closing = ") anonymous" if entry.anonymous else ")"
        return "\n".join([f"event {entry.name}(", self.indent(params), closing])

    def write_inputs(self, parameters: Iterable[AbiParameter]) -> str:
        return ",\n".join(
            self.write_parameter(
                parameter.with_type(f"{parameter.type} calldata")
                if parameter.is_array
                else parameter
            )
            for parameter in parameters
        )

    def write_outputs(self, parameters: Iterable[AbiParameter]) -> str:
        return ",\n".join(
            self.write_parameter(
                parameter.with_type("string memory")
                if parameter.type == "string"
                else parameter
            )
            for parameter in parameters
        )

    def write_parameter(self, parameter: AbiParameter) -> str:
        return f"{parameter.type} {parameter.name}".strip()


def render_interface(
    generator_input: GeneratorInput, options: Optional[WriterOptions] = None
) -> str:
    writer = SolidityInterfaceWriter(generator_input.declared_name, options)
    source = writer.write_abi(generator_input.abi)
    logger.debug(
        "Rendered interface %s from %d ABI entries",
        generator_input.declared_name,
        len(generator_input.abi),
    )
    return source


def describe_interface(
    declared_name: str,
    abi: Any,
    options: Optional[WriterOptions] = None,
) -> str:
    """Return Solidity interface source for ``abi``.

    ``abi`` may be a parsed ABI tuple or decoded JSON; the latter is
    normalized first and may raise :class:`AbiFormatError`.
    """
    if not isinstance(abi, tuple):
        abi = parse_abi(abi)
    return render_interface(GeneratorInput(declared_name, abi), options)


def try_describe_interface(
    declared_name: str,
    body: str,
    options: Optional[WriterOptions] = None,
) -> GenerationResult:
    """Generate an interface from raw ABI JSON without raising.

    Malformed JSON, malformed ABI entries and rendering failures all come
    back as :class:`Fallback`, as does any other exception raised on the way.
    """
    try:
        abi = load_abi(body)
        return Generated(describe_interface(declared_name, abi, options))
    except Exception as exc:
        # Whatever went wrong, the caller serves the raw body instead.
        return Fallback(str(exc) or type(exc).__name__)
