"""Exception hierarchy shared by collectors and the HTTP layer.

Every error carries the HTTP status it should surface as, so routes never
translate failures by hand; ``controlmate.main`` registers one handler for
the whole family.
"""

from __future__ import annotations

from typing import Sequence


class ControlMateError(Exception):
    """Base class for all failures surfaced to API callers."""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ToolUnavailableError(ControlMateError):
    """A required host tool (e.g. nmcli) is not installed."""

    http_status = 503

    def __init__(self, tool: str) -> None:
        super().__init__(f"{tool} is not installed or not available")
        self.tool = tool


class CommandError(ControlMateError):
    """An external command could not be spawned or exited non-zero."""

    http_status = 500

    def __init__(
        self,
        message: str,
        argv: Sequence[str] = (),
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.output = output

    def with_context(self, context: str) -> CommandError:
        return CommandError(
            f"{context}: {self.message}",
            argv=self.argv,
            returncode=self.returncode,
            output=self.output,
        )


class EnumerationError(ControlMateError):
    """The OS refused to enumerate a resource (interfaces, processes)."""

    http_status = 500


class InvalidRequestError(ControlMateError):
    http_status = 400


class UnsupportedSecurityError(InvalidRequestError):
    def __init__(self, security: str) -> None:
        super().__init__(f"unsupported security type: {security}")
        self.security = security
