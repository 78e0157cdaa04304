# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# USAGE:
# ------
#   mimeselect                  # walk desktop files, prompt, run xdg-mime
#   mimeselect --dry-run        # prompt, but only log the xdg-mime calls
#   mimeselect --log-level debug
#   python -m mimeselect
#
# EXIT CODES:
# -----------
#   0 → completed
#   1 → stderr not a terminal, input channel broken,
#       xdg-mime killed by a signal, or interrupted
#
# ==============================================

import argparse
import logging
from typing import List, Optional

from mimeselect import __version__
from mimeselect.app import MimeSelect
from mimeselect.config import get_config
from mimeselect.errors import FatalError
from mimeselect.log import configure_logging
from mimeselect.resolution import DryRunRegistry
from mimeselect.terminal import cursor_guard, stderr_is_terminal

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mimeselect",
        description="Pick a default application for every MIME type "
                    "declared by installed desktop files."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="log the xdg-mime commands instead of running them"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="override MIMESELECT_LOG (debug, info, warning, error)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run mimeselect.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config.logging)

    if not stderr_is_terminal():
        logger.error("This application requires that stderr is a terminal!")
        return 1

    registry = None
    if args.dry_run:
        registry = DryRunRegistry(config.registry.command)

    with cursor_guard():
        try:
            MimeSelect(config, registry=registry).run()
        except FatalError as e:
            logger.error(str(e))
            return e.exit_code
        except KeyboardInterrupt:
            logger.error("Interrupted")
            return 1

    return 0
