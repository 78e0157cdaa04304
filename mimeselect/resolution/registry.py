# ==============================================
# Default-Handler Registry
# ==============================================
#
# PURPOSE:
#   Store one "MIME type → handler" decision by running an external
#   command, synchronously, once per type:
#
#       xdg-mime default <handler> <mimetype>
#
# OUTCOMES:
# ---------
#   exit 0        → DispatchResult(returncode=0)      ok
#   exit N != 0   → DispatchResult(returncode=N)      caller logs, continues
#   killed by sig → DispatchResult(signal=S)          caller aborts the run
#   not runnable  → DispatchAborted raised
#
# ==============================================

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from mimeselect.errors import DispatchAborted

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """How the registry command terminated."""
    returncode: Optional[int] = 0
    signal: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.signal is None and self.returncode == 0

    @property
    def killed(self) -> bool:
        return self.signal is not None

    @classmethod
    def from_returncode(cls, returncode: int) -> "DispatchResult":
        """subprocess reports death-by-signal as a negative return code."""
        if returncode < 0:
            return cls(returncode=None, signal=-returncode)
        return cls(returncode=returncode)


class XdgMimeRegistry:
    """Runs ``xdg-mime default`` (or a configured replacement)."""

    dry_run = False

    def __init__(self, command: Sequence[str] = ("xdg-mime", "default")):
        self.command = tuple(command)

    @property
    def name(self) -> str:
        return " ".join(self.command)

    @property
    def program(self) -> str:
        return self.command[0]

    def build_command(self, handler: str, mimetype: str) -> List[str]:
        return [*self.command, handler, mimetype]

    def set_default(self, handler: str, mimetype: str) -> DispatchResult:
        """
        Register ``handler`` as the default for ``mimetype``.

        Args:
            handler: Handler identifier (desktop file path)
            mimetype: MIME type string

        Returns:
            DispatchResult describing how the command terminated

        Raises:
            DispatchAborted: The command could not be started
        """
        command = self.build_command(handler, mimetype)
        logger.debug(f"Executing {command}")
        try:
            proc = subprocess.run(command, check=False)
        except OSError as e:
            raise DispatchAborted(f"Failed to run {self.command[0]}! {e}") from e
        return DispatchResult.from_returncode(proc.returncode)


class DryRunRegistry(XdgMimeRegistry):
    """Never runs the command; dispatch() still announces it."""

    dry_run = True

    def set_default(self, handler: str, mimetype: str) -> DispatchResult:
        return DispatchResult()
