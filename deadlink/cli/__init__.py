"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from deadlink import __version__
    from deadlink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"deadlink {__version__}")
        return 0

    app = _create_app()
    try:
        app(argv)
    except SystemExit as e:
        # Click always ends standalone invocations with sys.exit
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
