"""
Exception types for Open Targets tool execution.

Remote, shape and input failures are raised internally and surfaced to the
MCP caller as a single ToolExecutionError.
"""

from typing import Any, Optional


class OpenTargetsError(Exception):
    """Base error for Open Targets operations."""


class RemoteCallError(OpenTargetsError):
    """
    The GraphQL call itself failed.

    Covers network errors, non-2xx responses, undecodable bodies and
    GraphQL ``errors`` payloads.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MissingFieldError(OpenTargetsError):
    """The remote payload did not have the shape the tool expects."""


class InputValidationError(OpenTargetsError):
    """Tool arguments were rejected before any remote call was made."""


class ToolExecutionError(OpenTargetsError):
    """Descriptive failure raised to the MCP caller for a failed tool call."""

    def __init__(
        self,
        tool_name: str,
        identifier: Any,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        self.tool_name = tool_name
        self.identifier = identifier
        self.cause = cause
        super().__init__(message)
