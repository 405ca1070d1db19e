"""Module entrypoint for `python -m solidity_abi_resolver`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
