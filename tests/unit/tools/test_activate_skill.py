"""Unit tests for the skill activation tool."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from cirrus.session.context import SessionContext
from cirrus.skills.types import SkillDefinition
from cirrus.tools.activate_skill import ActivateSkillTool
from cirrus.tools.base import ToolValidationError
from tests.unit.helpers import RecordingAuthenticator

_LISTED = SkillDefinition(
    name="test-skill",
    description="A test skill",
    location="/path/to/test-skill/SKILL.md",
)


class _FakeDiscovery:
    """Discovery fake with configurable listing and content results."""

    def __init__(
        self,
        skills: Sequence[SkillDefinition] = (_LISTED,),
        content: SkillDefinition | None = None,
    ) -> None:
        self.skills = tuple(skills)
        self.content = content
        self.calls: list[str] = []

    async def list_skills(self) -> tuple[SkillDefinition, ...]:
        self.calls.append("list_skills")
        return self.skills

    async def get_skill_content(self, location: str) -> SkillDefinition | None:
        self.calls.append(f"get_skill_content:{location}")
        return self.content


class _RecordingSession(SessionContext):
    """Session that records activation calls."""

    def __init__(self, discovery: _FakeDiscovery) -> None:
        super().__init__(
            authenticator=RecordingAuthenticator(),
            skill_discovery=discovery,
        )
        self.activated: list[str] = []

    def activate_skill(self, name: str) -> None:
        self.activated.append(name)
        super().activate_skill(name)


def _loaded(body: str = "Skill instructions content.") -> SkillDefinition:
    return _LISTED.model_copy(update={"body": body})


@pytest.mark.unit
@pytest.mark.asyncio
async def test_activates_known_skill_and_returns_content() -> None:
    """A discoverable, readable skill should be activated exactly once."""
    # Arrange - discovery returning listed skill with content
    discovery = _FakeDiscovery(content=_loaded())
    session = _RecordingSession(discovery)
    invocation = ActivateSkillTool(session).build({"name": "test-skill"})

    # Act - execute activation
    result = await invocation.execute(asyncio.Event())

    # Assert - activation and rendered content
    assert session.activated == ["test-skill"]
    assert session.is_skill_active("test-skill")
    assert 'Skill "test-skill" activated successfully' in result.llm_content
    assert "Skill instructions content." in result.llm_content
    assert result.return_display == 'Skill "test-skill" activated.'
    assert discovery.calls == [
        "list_skills",
        "get_skill_content:/path/to/test-skill/SKILL.md",
    ]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unknown_skill_returns_not_found_without_activation() -> None:
    """Unknown names should be reported and never activated."""
    discovery = _FakeDiscovery(content=_loaded())
    session = _RecordingSession(discovery)
    invocation = ActivateSkillTool(session).build({"name": "non-existent"})

    result = await invocation.execute(asyncio.Event())

    assert 'Error: Skill "non-existent" not found' in result.llm_content
    assert "Available skills are: test-skill" in result.llm_content
    assert result.return_display == 'Skill "non-existent" not found.'
    assert session.activated == []
    assert discovery.calls == ["list_skills"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_not_found_guidance_when_no_skills_exist() -> None:
    """An empty catalog should say no skills are available."""
    session = _RecordingSession(_FakeDiscovery(skills=()))
    invocation = ActivateSkillTool(session).build({"name": "anything"})

    result = await invocation.execute()

    assert result.llm_content.endswith("Available skills are: none")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unreadable_content_returns_error_without_activation() -> None:
    """A listed skill whose content cannot be loaded must not be activated."""
    discovery = _FakeDiscovery(content=None)
    session = _RecordingSession(discovery)
    invocation = ActivateSkillTool(session).build({"name": "test-skill"})

    result = await invocation.execute(asyncio.Event())

    assert (
        'Error: Could not read content for skill "test-skill"' in result.llm_content
    )
    assert result.return_display == 'Could not read content for skill "test-skill".'
    assert session.activated == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_name_match_is_exact() -> None:
    """Near-miss names should not match a listed skill."""
    session = _RecordingSession(_FakeDiscovery(content=_loaded()))
    invocation = ActivateSkillTool(session).build({"name": "Test-Skill"})

    result = await invocation.execute()

    assert result.return_display == 'Skill "Test-Skill" not found.'
    assert session.activated == []


@pytest.mark.unit
@pytest.mark.parametrize("invalid_name", ["", "   "], ids=["empty", "whitespace_only"])
def test_build_rejects_blank_name_before_any_io(invalid_name: str) -> None:
    """Blank names should be rejected synchronously at build time."""
    discovery = _FakeDiscovery()
    tool = ActivateSkillTool(_RecordingSession(discovery))

    with pytest.raises(
        ToolValidationError, match="The 'name' parameter must be non-empty"
    ):
        tool.build({"name": invalid_name})

    assert discovery.calls == []


@pytest.mark.unit
def test_build_rejects_missing_or_unknown_fields() -> None:
    """Schema violations should surface as validation errors."""
    tool = ActivateSkillTool(_RecordingSession(_FakeDiscovery()))

    with pytest.raises(ToolValidationError, match="activate_skill"):
        tool.build({})
    with pytest.raises(ToolValidationError):
        tool.build({"name": "test-skill", "extra": True})


@pytest.mark.unit
@pytest.mark.asyncio
async def test_preset_abort_signal_skips_discovery() -> None:
    """An already-fired signal should cancel before discovery runs."""
    discovery = _FakeDiscovery(content=_loaded())
    session = _RecordingSession(discovery)
    invocation = ActivateSkillTool(session).build({"name": "test-skill"})
    signal = asyncio.Event()
    signal.set()

    result = await invocation.execute(signal)

    assert result.return_display == 'Skill "test-skill" activation was cancelled.'
    assert discovery.calls == []
    assert session.activated == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_abort_during_content_load_cancels_in_flight_call() -> None:
    """Firing the signal mid-load should cancel the load and skip activation."""
    started = asyncio.Event()
    cancelled = asyncio.Event()

    class _SlowDiscovery(_FakeDiscovery):
        async def get_skill_content(self, location: str) -> SkillDefinition | None:
            started.set()
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return _loaded()

    session = _RecordingSession(_SlowDiscovery())
    invocation = ActivateSkillTool(session).build({"name": "test-skill"})
    signal = asyncio.Event()

    task = asyncio.create_task(invocation.execute(signal))
    await started.wait()
    signal.set()
    result = await asyncio.wait_for(task, timeout=5)

    assert "cancelled" in result.llm_content
    assert cancelled.is_set()
    assert session.activated == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_discovery_failure_is_reported_not_raised() -> None:
    """Collaborator errors should become error results at the tool boundary."""

    class _BrokenDiscovery(_FakeDiscovery):
        async def list_skills(self) -> tuple[SkillDefinition, ...]:
            raise OSError("skills directory unreadable")

    session = _RecordingSession(_BrokenDiscovery())
    invocation = ActivateSkillTool(session).build({"name": "test-skill"})

    result = await invocation.execute()

    assert result.llm_content == (
        'Error: Failed to activate skill "test-skill": skills directory unreadable'
    )
    assert session.activated == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_available_skill_names_sorted() -> None:
    """Tool should expose discoverable skill names in sorted order."""
    skills = (
        SkillDefinition(name="zeta", location="z"),
        SkillDefinition(name="alpha", location="a"),
    )
    tool = ActivateSkillTool(_RecordingSession(_FakeDiscovery(skills=skills)))

    assert await tool.available_skill_names() == ("alpha", "zeta")


@pytest.mark.unit
def test_parameter_schema_and_description() -> None:
    """Schema should require the name field and invocations describe themselves."""
    tool = ActivateSkillTool(_RecordingSession(_FakeDiscovery()))

    schema = tool.parameter_schema()
    invocation = tool.build({"name": "test-skill"})

    assert schema["required"] == ["name"]
    assert invocation.describe() == 'Activate skill "test-skill"'
