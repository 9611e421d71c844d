"""Entry point for the ``tfdoc-html`` command."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .errors import TfdocError
from .pipeline import run
from .settings import resolve_settings

UNEXPECTED_ERROR_EXIT_CODE = 3


def _fail(exc: BaseException, code: int) -> int:
    print(f"Error: {exc}", file=sys.stderr)
    return code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""

    try:
        settings = resolve_settings(argv)
        run(settings)
    except TfdocError as exc:
        return _fail(exc, exc.exit_code)
    except Exception as exc:  # noqa: BLE001
        return _fail(exc, UNEXPECTED_ERROR_EXIT_CODE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
