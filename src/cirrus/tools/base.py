"""Validate-then-execute tool contracts."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from collections.abc import Awaitable, Mapping
from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

AbortSignal: TypeAlias = asyncio.Event

T = TypeVar("T")
P = TypeVar("P", bound=BaseModel)


class ToolResult(BaseModel):
    """Tool outcome rendered for the model and for the terminal."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    llm_content: str
    return_display: str


class ToolValidationError(ValueError):
    """Raised when tool parameters are rejected before execution."""


class ToolAbortedError(RuntimeError):
    """Raised when an abort signal interrupts in-flight tool work."""


async def run_abortable(awaitable: Awaitable[T], signal: AbortSignal | None) -> T:
    """Await work unless the abort signal fires first.

    Args:
        awaitable: Work to run.
        signal: Optional abort signal.

    Returns:
        Result of the awaited work.

    Raises:
        ToolAbortedError: If the signal is set before or while the work runs.
    """
    if signal is None:
        return await awaitable
    if signal.is_set():
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        raise ToolAbortedError("Aborted before start")

    work = asyncio.ensure_future(awaitable)
    waiter = asyncio.ensure_future(signal.wait())
    try:
        await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        work.cancel()
        raise
    finally:
        waiter.cancel()
    if work.done():
        return work.result()
    work.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await work
    raise ToolAbortedError("Aborted while running")


class ToolInvocation(Generic[P]):
    """One validated, ready-to-run tool call."""

    def __init__(self, params: P) -> None:
        """Store validated params.

        Args:
            params: Validated tool parameters.
        """
        self.params = params

    def describe(self) -> str:
        """Return a one-line summary of what the call will do.

        Returns:
            Human-readable description.
        """
        return type(self).__name__

    async def execute(self, signal: AbortSignal | None = None) -> ToolResult:
        """Run the call.

        Args:
            signal: Optional abort signal.

        Raises:
            NotImplementedError: When subclass does not override execution.
        """
        del signal
        raise NotImplementedError("Invocation must override execute(...)")


class BaseTool(Generic[P]):
    """Tool base class with schema validation and invocation building."""

    name: str = "tool"
    display_name: str = "Tool"
    description: str = ""
    params_model: type[P]

    def parameter_schema(self) -> dict[str, Any]:
        """Return JSON schema for tool parameters.

        Returns:
            JSON schema mapping.
        """
        return self.params_model.model_json_schema()

    def validate_params(self, params: P) -> str | None:
        """Check semantic constraints beyond the schema.

        Args:
            params: Schema-valid parameters.

        Returns:
            Error message, or ``None`` when parameters are acceptable.
        """
        del params
        return None

    def build(self, params: Mapping[str, Any] | P) -> ToolInvocation[P]:
        """Validate parameters and create an invocation.

        Args:
            params: Raw or typed parameters.

        Returns:
            Ready-to-run invocation.

        Raises:
            ToolValidationError: If parameters fail schema or semantic checks.
        """
        try:
            typed = self.params_model.model_validate(params)
        except ValidationError as exc:
            raise ToolValidationError(
                f"Invalid parameters for {self.name}: {exc}"
            ) from exc
        error = self.validate_params(typed)
        if error is not None:
            raise ToolValidationError(error)
        return self.create_invocation(typed)

    def create_invocation(self, params: P) -> ToolInvocation[P]:
        """Create an invocation for validated parameters.

        Args:
            params: Validated parameters.

        Raises:
            NotImplementedError: When subclass does not override creation.
        """
        del params
        raise NotImplementedError("Tool must override create_invocation(...)")
