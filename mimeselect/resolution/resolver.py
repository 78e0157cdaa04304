# ==============================================
# Resolver / Dispatcher
# ==============================================
#
# PURPOSE:
#   Turn every AssociationMap entry into exactly one Decision and
#   forward chosen handlers to the registry, one type at a time.
#
# RESOLUTION:
# -----------
#   0 candidates  → error logged, SKIPPED (never produced by the Aggregator)
#   1 candidate   → AUTOMATIC, no prompt, announced at INFO
#   2+ candidates → prompt via Selector:
#                     index          → INTERACTIVE
#                     None           → SKIPPED, "Skipping type ..."
#                     SelectionError → propagates (fatal)
#
# DISPATCH:
# ---------
#   exit 0       → silent
#   exit N != 0  → error logged, next type
#   signal       → DispatchAborted (fatal)
#
# ==============================================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence

from mimeselect.errors import DispatchAborted
from mimeselect.resolution.registry import XdgMimeRegistry
from mimeselect.resolution.selector import Selector

logger = logging.getLogger(__name__)


class Choice(Enum):
    """How a handler was (or was not) picked for a type."""
    AUTOMATIC = "automatic"
    INTERACTIVE = "interactive"
    SKIPPED = "skipped"


@dataclass
class Decision:
    """One MIME type paired with its chosen handler, if any."""
    mimetype: str
    handler: Optional[str]
    choice: Choice

    @property
    def skipped(self) -> bool:
        return self.handler is None


@dataclass
class AssociationSummary:
    """Counts reported after every type has been handled."""
    automatic: int = 0
    interactive: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def chosen(self) -> int:
        return self.automatic + self.interactive


def selection_prompt(mimetype: str) -> str:
    return f'Select the handler for "{mimetype}". (ESC or q to skip)'


def resolve(mimetype: str, programs: Sequence[str], selector: Selector) -> Decision:
    """
    Pick one handler for ``mimetype``.

    Args:
        mimetype: MIME type being resolved
        programs: Candidate handler identifiers, in discovery order
        selector: Used only when there are two or more candidates

    Returns:
        Decision for this type

    Raises:
        SelectionError: The operator's answer could not be read
    """
    if len(programs) == 0:
        logger.error(f'There\'s an empty list of programs for the type "{mimetype}"!')
        return Decision(mimetype, None, Choice.SKIPPED)

    if len(programs) == 1:
        logger.info(
            f'Magically selecting the only option ({programs[0]}) for type "{mimetype}".'
        )
        return Decision(mimetype, programs[0], Choice.AUTOMATIC)

    index = selector.select(programs, selection_prompt(mimetype))
    if index is None:
        logger.info(f"Skipping type {mimetype}")
        return Decision(mimetype, None, Choice.SKIPPED)
    return Decision(mimetype, programs[index], Choice.INTERACTIVE)


def dispatch(decision: Decision, registry: XdgMimeRegistry) -> bool:
    """
    Forward a decision to the registry.

    Args:
        decision: Output of resolve()
        registry: Sink that stores the default handler

    Returns:
        True if the registry accepted it, False if it was skipped or failed

    Raises:
        DispatchAborted: The registry command was killed by a signal
    """
    if decision.skipped:
        return False

    prefix = "[dry run] " if registry.dry_run else ""
    logger.info(f"{prefix}Running {registry.name} '{decision.handler}' '{decision.mimetype}'")
    result = registry.set_default(decision.handler, decision.mimetype)

    if result.killed:
        raise DispatchAborted(f"{registry.program} was terminated by signal, aborting.")
    if not result.ok:
        logger.error(f"{registry.program} exited with non-zero code {result.returncode}!")
        return False
    return True


def associate_all(
    associations: Mapping[str, Sequence[str]],
    selector: Selector,
    registry: XdgMimeRegistry
) -> AssociationSummary:
    """
    Resolve and dispatch every entry, strictly one after another.

    Args:
        associations: MIME type → candidates (read only)
        selector: Operator prompt
        registry: Default-handler sink

    Returns:
        AssociationSummary with per-outcome counts
    """
    summary = AssociationSummary()

    for mimetype, programs in associations.items():
        decision = resolve(mimetype, programs, selector)
        if decision.skipped:
            summary.skipped += 1
            continue

        if not dispatch(decision, registry):
            summary.failed += 1
        elif decision.choice is Choice.AUTOMATIC:
            summary.automatic += 1
        else:
            summary.interactive += 1

    return summary
