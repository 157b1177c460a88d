"""Entry point: python -m samples.woof [--dark] [--strings PATH] [--log-level LEVEL]"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from textual.logging import TextualHandler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Woof — browse the dog catalog as expandable cards",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Start with the dark palette (press 't' to switch at runtime)",
    )
    parser.add_argument(
        "--strings",
        default=None,
        help="JSON file of string overrides layered over the bundled strings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold; records go to the Textual devtools console",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    from .app import WoofApp
    from .resources import Resources

    resources = Resources.load(strings_overlay=args.strings)
    app = WoofApp(resources=resources, dark=args.dark)
    app.run()
    raise SystemExit(app.return_code or 0)


if __name__ == "__main__":
    main()
