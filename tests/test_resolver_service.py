import asyncio

import pytest

from solidity_abi_resolver.services.resolver import (
    ResolutionError,
    ResolverService,
    create_service,
    resolve_import,
)
from solidity_abi_resolver.sources.abi_source import AbiSource
from solidity_abi_resolver.sources.fs_source import FSSource
from solidity_abi_resolver.sources.registry import (
    SourceRegistration,
    SourceRegistry,
    default_source_names,
)


def test_default_chain_is_abi_then_fs(tmp_path):
    service = create_service(str(tmp_path))
    assert [type(source) for source in service.sources] == [AbiSource, FSSource]


def test_json_import_is_served_by_abi_source(tmp_path, write_file, token_abi):
    write_file("Token.json", token_abi)
    resolved = asyncio.run(ResolverService(str(tmp_path)).resolve("Token.json"))
    assert resolved.source == "abi"
    assert "interface Token {" in resolved.body


def test_solidity_import_falls_through_to_fs(tmp_path, write_file):
    write_file("contracts/Math.sol", "library Math {}")
    resolved = asyncio.run(ResolverService(str(tmp_path)).resolve("contracts/Math.sol"))
    assert resolved.source == "fs"
    assert resolved.as_dict()["body"] == "library Math {}"


def test_fs_only_chain_serves_raw_json(tmp_path, write_file):
    write_file("Token.json", "[]")
    resolved = asyncio.run(
        resolve_import("Token.json", working_directory=str(tmp_path), source_names=["fs"])
    )
    assert resolved.body == "[]"


def test_unresolvable_import_raises(tmp_path):
    service = ResolverService(str(tmp_path))
    with pytest.raises(ResolutionError, match="Could not find Nope.json from any sources"):
        asyncio.run(service.resolve("Nope.json", "contracts/Main.sol"))


def test_unknown_source_raises_resolution_error(tmp_path):
    service = ResolverService(str(tmp_path), source_names=["ipfs"])
    with pytest.raises(ResolutionError):
        asyncio.run(service.resolve("Token.json"))


def test_source_kwargs_are_validated(tmp_path):
    service = ResolverService(str(tmp_path), source_kwargs={"fs": {"bogus": True}})
    with pytest.raises(ResolutionError, match="does not accept provided parameters"):
        asyncio.run(service.resolve("Token.json"))


def test_registry_rejects_duplicate_names():
    registry = SourceRegistry()
    registry.register(SourceRegistration(name="fs", factory=FSSource))
    with pytest.raises(ValueError):
        registry.register(SourceRegistration(name="fs", factory=FSSource))
    registry.register(SourceRegistration(name="fs", factory=AbiSource), override=True)
    assert registry.get("fs").factory is AbiSource
    with pytest.raises(KeyError):
        registry.get("npm")


def test_registry_orders_chain_by_position():
    registry = SourceRegistry()
    registry.register(SourceRegistration(name="fs", factory=FSSource, description="disk", position=90))
    registry.register(SourceRegistration(name="abi", factory=AbiSource, description="abi", position=10))
    registry.register(SourceRegistration(name="npm", factory=FSSource, description="packages", position=90))
    assert registry.names() == ("abi", "fs", "npm")
    assert registry.summary() == "abi: abi\nfs: disk\nnpm: packages"


def test_default_chain_comes_from_registry(tmp_path):
    assert default_source_names() == ("abi", "fs")
    assert ResolverService(str(tmp_path)).source_names == default_source_names()
