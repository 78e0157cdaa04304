# ==============================================
# STAGE 2: RESOLUTION & DISPATCH
# ==============================================
#
# This package turns the association map into one decision per
# MIME type and stores each chosen handler in the registry.
#
# Modules:
# --------
# - selector.py  → Interactive list prompt (simple-term-menu)
# - registry.py  → Runs `xdg-mime default <handler> <type>`
# - resolver.py  → Skip / auto-select / prompt, then dispatch
#
# ==============================================

from .selector import Selector, TerminalSelector
from .registry import DispatchResult, DryRunRegistry, XdgMimeRegistry
from .resolver import (
    AssociationSummary,
    Choice,
    Decision,
    associate_all,
    dispatch,
    resolve
)

__all__ = [
    "Selector",
    "TerminalSelector",
    "DispatchResult",
    "DryRunRegistry",
    "XdgMimeRegistry",
    "AssociationSummary",
    "Choice",
    "Decision",
    "associate_all",
    "dispatch",
    "resolve"
]
