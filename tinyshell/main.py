"""
Command line entry point: run the shell on standard input.
"""

import argparse
import asyncio
import codecs
import logging
import sys

from tinyshell.adapters.input.line_reader import LineReader
from tinyshell.adapters.input.stdin_source import connect_stdin
from tinyshell.container import DependencyContainer
from tinyshell.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


async def run_shell(container: DependencyContainer) -> None:
    """Read commands from stdin until it closes, then wait for running commands."""
    settings = container.get_settings()
    source = await connect_stdin()
    reader = LineReader(
        source,
        encoding=settings.encoding,
        read_size=settings.chunk_size,
        max_line_length=settings.max_line_length,
    )
    await container.get_dispatch_loop().run(reader)


def _apply_overrides(settings, args: argparse.Namespace) -> None:
    if args.encoding:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {args.encoding}")
        settings.encoding = args.encoding
    if args.log_level:
        level = args.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {args.log_level}")
        settings.log_level = level


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinyshell",
        description="Minimal command shell reading one command per line from stdin.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: TINYSHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Input text encoding (default: TINYSHELL_ENCODING or utf-8)",
    )
    args = parser.parse_args(argv)

    try:
        from tinyshell.config.settings import Settings

        settings = Settings()
        _apply_overrides(settings, args)
    except ConfigurationError as e:
        print(f"tinyshell: {e}", file=sys.stderr)
        return 2

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        asyncio.run(run_shell(DependencyContainer(settings)))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
