# ==============================================
# Terminal Guard
# ==============================================
#
# The selection menu hides the cursor while it is drawn. Whatever
# way the process ends (normal return, fatal error, SIGINT/SIGTERM),
# the cursor must be visible again afterwards.
#
# ==============================================

import atexit
import logging
import signal
import sys
from contextlib import contextmanager
from typing import Dict, Iterator

logger = logging.getLogger(__name__)

SHOW_CURSOR = "\x1b[?25h"
GUARDED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def stderr_is_terminal() -> bool:
    """True when stderr is attached to an interactive terminal."""
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def restore_cursor() -> None:
    """Make the terminal cursor visible again."""
    try:
        sys.stderr.write(SHOW_CURSOR)
        sys.stderr.flush()
    except (OSError, ValueError):
        # stderr already closed during interpreter shutdown
        pass


def _on_signal(signum, frame) -> None:
    restore_cursor()
    logger.debug(f"Received signal {signum}, exiting")
    sys.exit(1)


@contextmanager
def cursor_guard() -> Iterator[None]:
    """
    Guarantee cursor restoration for the duration of the block.

    Registers an atexit hook and SIGINT/SIGTERM handlers; all of them
    are removed again when the block exits.
    """
    atexit.register(restore_cursor)
    previous: Dict[int, object] = {}
    try:
        for sig in GUARDED_SIGNALS:
            previous[sig] = signal.signal(sig, _on_signal)
    except (ValueError, OSError) as e:
        # Signal handlers can only be registered in the main thread
        logger.error(
            f"Failed to set signal handler to restore cursor, continuing anyway.\n{e}"
        )

    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        restore_cursor()
        atexit.unregister(restore_cursor)
