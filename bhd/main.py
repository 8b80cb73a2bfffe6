#!/usr/bin/env python3

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from .app import ConverterApp

console = Console()


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="bhd",
        description="Binary-Hex-Decimal Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Description:
  Allows you to convert between binary, hexadecimal, and decimal numbers.
  Dot-separated groups (e.g. ff.ab or 11111111.10101011) are read as bytes,
  most significant first.

Keys:
  up/k, down/j   Move the selection
  enter          Confirm / convert / start over
  r              Reset
  q, ctrl+c      Quit
        """
    )


def main(argv: list[str] | None = None) -> int:
    # anything besides -h/--help is ignored
    build_parser().parse_known_args(argv)

    app = ConverterApp()
    try:
        app.run()
    except Exception as e:
        app.fatal_error = e

    if app.fatal_error is not None:
        console.print(f"Something went wrong: {escape(str(app.fatal_error))}", highlight=False)
        return 1

    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
