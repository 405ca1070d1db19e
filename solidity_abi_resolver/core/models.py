"""ABI data model shared across solidity_abi_resolver components."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union


class AbiFormatError(ValueError):
    """Raised when a document cannot be read as a contract ABI."""


class EntryKind(str, Enum):
    """Discriminant of an ABI entry."""

    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    RECEIVE = "receive"
    EVENT = "event"


class Mutability(str, Enum):
    """Normalized state mutability of a function-like entry."""

    PAYABLE = "payable"
    VIEW = "view"
    PURE = "pure"
    NONPAYABLE = "nonpayable"


def normalize_mutability(
    state_mutability: Optional[str] = None,
    payable: Optional[bool] = None,
    constant: Optional[bool] = None,
) -> Mutability:
    """Collapse modern and legacy mutability encodings into one value.

    ``stateMutability`` wins whenever it holds a known value. The legacy
    ``payable`` and ``constant`` flags are only consulted when it is unset,
    and ``payable`` takes precedence over ``constant``.
    """
    if state_mutability:
        try:
            return Mutability(state_mutability)
        except ValueError as exc:
            raise AbiFormatError(f"Unknown stateMutability {state_mutability!r}") from exc
    if payable:
        return Mutability.PAYABLE
    if constant:
        return Mutability.VIEW
    return Mutability.NONPAYABLE


@dataclass(frozen=True)
class AbiParameter:
    """A named, typed input or output slot."""

    name: str
    type: str
    indexed: bool = False
    components: Tuple["AbiParameter", ...] = ()

    @property
    def is_array(self) -> bool:
        return "[" in self.type

    def with_type(self, new_type: str) -> "AbiParameter":
        """Return a copy carrying ``new_type``."""
        return replace(self, type=new_type)


@dataclass(frozen=True)
class FunctionEntry:
    """A callable function."""

    kind: ClassVar[EntryKind] = EntryKind.FUNCTION

    name: str
    inputs: Tuple[AbiParameter, ...] = ()
    outputs: Tuple[AbiParameter, ...] = ()
    mutability: Mutability = Mutability.NONPAYABLE


@dataclass(frozen=True)
class ConstructorEntry:
    """The deployment constructor."""

    kind: ClassVar[EntryKind] = EntryKind.CONSTRUCTOR

    inputs: Tuple[AbiParameter, ...] = ()
    mutability: Mutability = Mutability.NONPAYABLE


@dataclass(frozen=True)
class FallbackEntry:
    """The unnamed fallback handler."""

    kind: ClassVar[EntryKind] = EntryKind.FALLBACK

    mutability: Mutability = Mutability.NONPAYABLE


@dataclass(frozen=True)
class ReceiveEntry:
    """The plain ether receive handler."""

    kind: ClassVar[EntryKind] = EntryKind.RECEIVE

    mutability: Mutability = Mutability.PAYABLE


@dataclass(frozen=True)
class EventEntry:
    """A log event declaration."""

    kind: ClassVar[EntryKind] = EntryKind.EVENT

    name: str
    inputs: Tuple[AbiParameter, ...] = ()
    anonymous: bool = False


AbiEntry = Union[FunctionEntry, ConstructorEntry, FallbackEntry, ReceiveEntry, EventEntry]
Abi = Tuple[AbiEntry, ...]


@dataclass(frozen=True)
class GeneratorInput:
    """Declared interface name paired with the ABI it describes."""

    declared_name: str
    abi: Abi


def _require_name(raw: Mapping[str, Any], kind: EntryKind) -> str:
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise AbiFormatError(f"{kind.value} entry is missing a name")
    return name


def _parse_parameter(raw: Any) -> AbiParameter:
    if not isinstance(raw, Mapping):
        raise AbiFormatError(f"ABI parameter must be an object, got {type(raw).__name__}")
    param_type = raw.get("type")
    if not isinstance(param_type, str):
        raise AbiFormatError("ABI parameter is missing a type")
    return AbiParameter(
        name=str(raw.get("name") or ""),
        type=param_type,
        indexed=bool(raw.get("indexed", False)),
        components=_parse_parameters(raw.get("components")),
    )


def _parse_parameters(raw: Any) -> Tuple[AbiParameter, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise AbiFormatError("ABI parameter list must be an array")
    return tuple(_parse_parameter(item) for item in raw)


def _entry_mutability(raw: Mapping[str, Any]) -> Mutability:
    return normalize_mutability(
        raw.get("stateMutability"), raw.get("payable"), raw.get("constant")
    )


def _parse_function(raw: Mapping[str, Any]) -> FunctionEntry:
    return FunctionEntry(
        name=_require_name(raw, EntryKind.FUNCTION),
        inputs=_parse_parameters(raw.get("inputs")),
        outputs=_parse_parameters(raw.get("outputs")),
        mutability=_entry_mutability(raw),
    )


def _parse_constructor(raw: Mapping[str, Any]) -> ConstructorEntry:
    return ConstructorEntry(
        inputs=_parse_parameters(raw.get("inputs")),
        mutability=_entry_mutability(raw),
    )


def _parse_fallback(raw: Mapping[str, Any]) -> FallbackEntry:
    return FallbackEntry(mutability=_entry_mutability(raw))


def _parse_receive(raw: Mapping[str, Any]) -> ReceiveEntry:
    # Anything else present on a receive entry is ignored.
    return ReceiveEntry()


def _parse_event(raw: Mapping[str, Any]) -> EventEntry:
    return EventEntry(
        name=_require_name(raw, EntryKind.EVENT),
        inputs=_parse_parameters(raw.get("inputs")),
        anonymous=bool(raw.get("anonymous", False)),
    )


_ENTRY_PARSERS: Dict[EntryKind, Callable[[Mapping[str, Any]], AbiEntry]] = {
    EntryKind.FUNCTION: _parse_function,
    EntryKind.CONSTRUCTOR: _parse_constructor,
    EntryKind.FALLBACK: _parse_fallback,
    EntryKind.RECEIVE: _parse_receive,
    EntryKind.EVENT: _parse_event,
}


def parse_entry(raw: Any) -> AbiEntry:
    """Build a typed entry from one decoded ABI object."""
    if not isinstance(raw, Mapping):
        raise AbiFormatError(f"ABI entry must be an object, got {type(raw).__name__}")
    # Entries without a type predate the field and are always functions.
    tag = raw.get("type") or EntryKind.FUNCTION.value
    try:
        kind = EntryKind(tag)
    except ValueError as exc:
        raise AbiFormatError(f"Unknown ABI entry type {tag!r}") from exc
    return _ENTRY_PARSERS[kind](raw)


def parse_abi(data: Any) -> Abi:
    """Normalize decoded ABI JSON into a tuple of typed entries.

    Accepts either a bare ABI array or an artifact object carrying it under
    an ``"abi"`` key.
    """
    if isinstance(data, Mapping) and "abi" in data:
        data = data["abi"]
    if not isinstance(data, list):
        raise AbiFormatError(f"ABI must be a JSON array, got {type(data).__name__}")
    return tuple(parse_entry(item) for item in data)


def load_abi(text: str) -> Abi:
    """Decode ABI JSON text."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise AbiFormatError(f"Invalid ABI JSON: {exc}") from exc
    return parse_abi(data)
