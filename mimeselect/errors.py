# ==============================================
# Errors
# ==============================================
#
# Only FatalError (and its subclasses) ever leaves the layer that
# detects it. Per-file and per-type problems are logged in place.
#
# ==============================================


class MimeSelectError(Exception):
    """Base class for all mimeselect errors."""


class FatalError(MimeSelectError):
    """
    A condition after which the run cannot continue.

    The CLI logs the message and terminates with ``exit_code``.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class SelectionError(FatalError):
    """Reading the operator's answer from the terminal failed."""


class DispatchAborted(FatalError):
    """The registry command was killed by a signal or could not be started."""
