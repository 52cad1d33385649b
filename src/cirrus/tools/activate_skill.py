"""Tool that activates a discovered skill for the running session."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from cirrus.auth.errors import error_message
from cirrus.session.context import SessionContext
from cirrus.tools.base import (
    AbortSignal,
    BaseTool,
    ToolAbortedError,
    ToolInvocation,
    ToolResult,
    run_abortable,
)

_LOGGER = logging.getLogger(__name__)

ACTIVATE_SKILL_TOOL_NAME = "activate_skill"


class ActivateSkillParams(BaseModel):
    """Parameters for skill activation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(description="Name of the skill to activate.")


class ActivateSkillInvocation(ToolInvocation[ActivateSkillParams]):
    """Single activation of one named skill."""

    def __init__(self, session: SessionContext, params: ActivateSkillParams) -> None:
        """Store session and params.

        Args:
            session: Session the skill is activated against.
            params: Validated activation parameters.
        """
        super().__init__(params)
        self._session = session

    def describe(self) -> str:
        """Return a one-line summary of the activation.

        Returns:
            Human-readable description.
        """
        return f'Activate skill "{self.params.name}"'

    async def execute(self, signal: AbortSignal | None = None) -> ToolResult:
        """Discover, load and activate the requested skill.

        Args:
            signal: Optional abort signal for discovery and content loading.

        Returns:
            Activation result for the model and the terminal.
        """
        name = self.params.name
        discovery = self._session.get_skill_discovery_service()
        try:
            skills = await run_abortable(discovery.list_skills(), signal)
            skill = next((entry for entry in skills if entry.name == name), None)
            if skill is None:
                available = ", ".join(sorted(entry.name for entry in skills))
                return ToolResult(
                    llm_content=(
                        f'Error: Skill "{name}" not found. '
                        f"Available skills are: {available or 'none'}"
                    ),
                    return_display=f'Skill "{name}" not found.',
                )
            loaded = await run_abortable(
                discovery.get_skill_content(skill.location), signal
            )
        except ToolAbortedError:
            message = f'Skill "{name}" activation was cancelled.'
            return ToolResult(llm_content=message, return_display=message)
        except Exception as exc:
            _LOGGER.debug("Skill lookup for %s failed: %s", name, exc)
            return ToolResult(
                llm_content=(
                    f'Error: Failed to activate skill "{name}": {error_message(exc)}'
                ),
                return_display=f'Failed to activate skill "{name}".',
            )

        if loaded is None or loaded.body is None:
            return ToolResult(
                llm_content=(
                    f'Error: Could not read content for skill "{name}" '
                    f"at {skill.location}."
                ),
                return_display=f'Could not read content for skill "{name}".',
            )

        self._session.activate_skill(name)
        _LOGGER.debug("Activated skill %s.", name)
        return ToolResult(
            llm_content=(
                f'Skill "{name}" activated successfully. '
                f"Follow these instructions:\n\n{loaded.body}"
            ),
            return_display=f'Skill "{name}" activated.',
        )


class ActivateSkillTool(BaseTool[ActivateSkillParams]):
    """Activate a named skill so its instructions join the session."""

    name = ACTIVATE_SKILL_TOOL_NAME
    display_name = "Activate Skill"
    description = (
        "Activates a skill by name and returns its instructions. Use it when a "
        "task matches a skill's description."
    )
    params_model = ActivateSkillParams

    def __init__(self, session: SessionContext) -> None:
        """Store session dependency.

        Args:
            session: Session whose discovery service and activation state are used.
        """
        self._session = session

    async def available_skill_names(self) -> tuple[str, ...]:
        """Return sorted names of every discoverable skill.

        Returns:
            Skill names.
        """
        skills = await self._session.get_skill_discovery_service().list_skills()
        return tuple(sorted(skill.name for skill in skills))

    def validate_params(self, params: ActivateSkillParams) -> str | None:
        """Reject blank skill names.

        Args:
            params: Schema-valid parameters.

        Returns:
            Error message, or ``None`` when the name is usable.
        """
        if not params.name.strip():
            return "The 'name' parameter must be non-empty"
        return None

    def create_invocation(
        self, params: ActivateSkillParams
    ) -> ActivateSkillInvocation:
        """Create an activation invocation.

        Args:
            params: Validated parameters.

        Returns:
            Activation invocation bound to this tool's session.
        """
        return ActivateSkillInvocation(self._session, params)
