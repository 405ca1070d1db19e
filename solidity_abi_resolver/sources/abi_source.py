"""Import source that turns ``.json`` ABI files into Solidity interfaces."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..core.source_base import Resolution
from ..generator.interface import Fallback, WriterOptions, try_describe_interface
from .fs_source import FSSource
from .registry import register_source

logger = logging.getLogger(__name__)

ABI_SUFFIX = ".json"


def _strip_suffix(value: str, suffix: str) -> str:
    if value.endswith(suffix) and value != suffix:
        return value[: -len(suffix)]
    return value


def declared_name_from_path(file_path: str) -> str:
    """Derive the interface name from ``Foo.json`` or ``Foo.abi.json``."""
    basename = os.path.basename(file_path)
    return _strip_suffix(_strip_suffix(basename, ".json"), ".abi")


class AbiSource(FSSource):
    """Serve ABI JSON imports as generated interface source.

    Paths that do not end in ``.json`` are left to the rest of the chain.
    Bodies that do not parse as an ABI are returned untouched.
    """

    name = "abi"

    def __init__(
        self,
        working_directory: Optional[str] = None,
        *,
        options: Optional[WriterOptions] = None,
    ) -> None:
        super().__init__(working_directory)
        self.options = options or WriterOptions()

    async def resolve(self, import_path: str, imported_from: str = "") -> Resolution:
        if not import_path.endswith(ABI_SUFFIX):
            return Resolution.empty()

        resolution = await super().resolve(import_path, imported_from)
        if not resolution:
            return resolution

        declared_name = declared_name_from_path(resolution.file_path or import_path)
        result = try_describe_interface(declared_name, resolution.body, self.options)
        if isinstance(result, Fallback):
            logger.debug(
                "Serving %s as raw JSON: %s", resolution.file_path, result.reason
            )
            return resolution

        return Resolution(file_path=resolution.file_path, body=result.source)


register_source(
    AbiSource.name,
    AbiSource,
    description="Contract ABI JSON rendered as a Solidity interface.",
    position=10,
    override=True,
)
