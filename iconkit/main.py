"""Entry point for iconkit: load config, render icons, write them to the output directory."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from iconkit.config import get_config
from iconkit.core.logging_config import setup_logging
from iconkit.generate import IconTarget, generate_icons

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconkit",
        description="Generate favicon PNGs, apple-touch icon and favicon.ico.",
    )
    parser.add_argument("--config", help="Path to a YAML config (default: bundled default.yaml).")
    parser.add_argument("--output-dir", help="Directory to write icons into.")
    parser.add_argument(
        "--level", type=int, choices=range(10), metavar="0-9", help="zlib compression level."
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG.")
    parser.add_argument(
        "--plain-logs", action="store_true", help="key=value log lines instead of JSON."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = get_config(args.config)
    except ValueError as e:
        setup_logging(level=args.log_level or "INFO", use_json=not args.plain_logs)
        logger.error("Invalid configuration: %s", e)
        return 1
    setup_logging(
        level=args.log_level or config.log.level,
        use_json=config.log.use_json and not args.plain_logs,
    )
    icons = config.icons
    output_dir = args.output_dir or icons.output_dir
    level = icons.compression_level if args.level is None else args.level
    try:
        written = generate_icons(
            output_dir,
            glyph=config.glyph(),
            targets=[IconTarget(t.filename, t.size) for t in icons.targets],
            ico_name=icons.ico_name,
            ico_sizes=icons.ico_sizes,
            level=level,
        )
    except (OSError, ValueError) as e:
        logger.exception("Icon generation failed: %s", e)
        return 1
    logger.info("Icons generated in %s (%d files)", output_dir, len(written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
