from __future__ import annotations

import sys

from asciiclock_app.cli import main as _cli_main


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; with no arguments start the HTTP server."""
    args = sys.argv[1:] if argv is None else argv
    return int(_cli_main(args or ["serve"]))


if __name__ == "__main__":
    raise SystemExit(main())
