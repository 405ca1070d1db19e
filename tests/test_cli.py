import json

import pytest

from solidity_abi_resolver.cli import main as cli_main


def test_describe_prints_interface(write_file, token_abi, capsys: pytest.CaptureFixture[str]):
    path = write_file("abis/Token.abi.json", token_abi)
    exit_code = cli_main(["describe", str(path)])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.startswith("//SPDX-License-Identifier: UNLICENSED\n")
    assert "interface Token {" in captured.out
    assert "Transfer" not in captured.out


def test_describe_options(write_file, token_abi, capsys: pytest.CaptureFixture[str]):
    path = write_file("Token.json", token_abi)
    exit_code = cli_main(
        [
            "describe",
            str(path),
            "--name",
            "IToken",
            "--render-events",
            "--pragma",
            "^0.7.0",
            "--license",
            "MIT",
        ]
    )
    captured = capsys.readouterr()
    assert exit_code == 0
    assert "//SPDX-License-Identifier: MIT" in captured.out
    assert "pragma solidity ^0.7.0;" in captured.out
    assert "interface IToken {" in captured.out
    assert "event Transfer(" in captured.out


def test_describe_reports_malformed_abi(write_file, capsys: pytest.CaptureFixture[str]):
    path = write_file("Broken.json", "not json")
    exit_code = cli_main(["describe", str(path)])
    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err.startswith("Error:")


def test_describe_reports_missing_file(tmp_path, capsys: pytest.CaptureFixture[str]):
    exit_code = cli_main(["describe", str(tmp_path / "Missing.json")])
    assert exit_code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_resolve_outputs_json(tmp_path, write_file, token_abi, capsys: pytest.CaptureFixture[str]):
    write_file("Token.json", token_abi)
    exit_code = cli_main(["resolve", "Token.json", "--cwd", str(tmp_path)])
    captured = capsys.readouterr()
    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["source"] == "abi"
    assert payload["filePath"].endswith("Token.json")
    assert "interface Token {" in payload["body"]


def test_resolve_unresolvable_import(tmp_path, capsys: pytest.CaptureFixture[str]):
    exit_code = cli_main(["resolve", "Nope.json", "--cwd", str(tmp_path), "--sources", "abi"])
    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Could not find Nope.json" in captured.err


def test_sources_lists_chain_in_order(capsys: pytest.CaptureFixture[str]):
    exit_code = cli_main(["sources"])
    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert [line.split(":", 1)[0] for line in lines] == ["abi", "fs"]
    assert "Solidity interface" in lines[0]
