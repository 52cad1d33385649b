"""Session tools."""

from cirrus.tools.activate_skill import (
    ACTIVATE_SKILL_TOOL_NAME,
    ActivateSkillInvocation,
    ActivateSkillParams,
    ActivateSkillTool,
)
from cirrus.tools.base import (
    AbortSignal,
    BaseTool,
    ToolAbortedError,
    ToolInvocation,
    ToolResult,
    ToolValidationError,
    run_abortable,
)

__all__ = [
    "ACTIVATE_SKILL_TOOL_NAME",
    "AbortSignal",
    "ActivateSkillInvocation",
    "ActivateSkillParams",
    "ActivateSkillTool",
    "BaseTool",
    "ToolAbortedError",
    "ToolInvocation",
    "ToolResult",
    "ToolValidationError",
    "run_abortable",
]
