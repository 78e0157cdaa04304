# ==============================================
# Selector
# ==============================================
#
# PURPOSE:
#   Present a list of handlers to the operator and return which one
#   they picked.
#
# CONTRACT:
# ---------
#   select(items, prompt) -> int | None
#     int   → zero-based index into items
#     None  → operator abandoned the prompt (ESC or q)
#     raises SelectionError → the terminal could not be read
#
# ==============================================

import logging
import termios
from typing import Optional, Protocol, Sequence

from simple_term_menu import TerminalMenu

from mimeselect.errors import SelectionError

logger = logging.getLogger(__name__)


def menu_entry(item: str) -> str:
    """Escape '|', which simple-term-menu reads as its data separator."""
    return item.replace("|", "\\|")


class Selector(Protocol):
    """Anything that can ask the operator to pick one item."""

    def select(self, items: Sequence[str], prompt: str) -> Optional[int]:
        ...


class TerminalSelector:
    """Arrow-key list menu drawn on the controlling terminal."""

    def __init__(self, quit_keys: Sequence[str] = ("escape", "q")):
        self.quit_keys = tuple(quit_keys)

    def select(self, items: Sequence[str], prompt: str) -> Optional[int]:
        """
        Show ``items`` under ``prompt`` and wait for the operator.

        Args:
            items: Entries to choose from
            prompt: Title line shown above the entries

        Returns:
            Index of the chosen entry, or None if the prompt was abandoned

        Raises:
            SelectionError: Reading from the terminal failed
        """
        try:
            menu = TerminalMenu(
                [menu_entry(item) for item in items],
                title=prompt,
                quit_keys=self.quit_keys,
                raise_error_on_interrupt=True
            )
            index = menu.show()
        except (OSError, EOFError, termios.error, NotImplementedError) as e:
            raise SelectionError(f"Failed to read selection: {e}") from e

        logger.debug(f"Menu returned {index!r}")
        return index
