"""Module entry point for `python -m type_schema_scanner`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
