from __future__ import annotations

import sys
from collections.abc import Sequence

from pytxt.app import run_app


def main(argv: Sequence[str] | None = None) -> int:
    """Console-script and `python -m pytxt` entrypoint."""
    return run_app(sys.argv if argv is None else argv)


if __name__ == "__main__":
    raise SystemExit(main())
