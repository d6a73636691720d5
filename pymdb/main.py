from __future__ import annotations
import sys
from pymdb.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pymdb.main` or `python -m pymdb` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
