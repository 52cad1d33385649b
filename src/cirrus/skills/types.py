"""Skills domain types and discovery port."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict


class SkillDefinition(BaseModel):
    """Discovered skill, with instructional body once content is loaded."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str = ""
    location: str
    body: str | None = None


class SkillDiscoveryService(Protocol):
    """Discovery collaborator consumed by skill activation."""

    async def list_skills(self) -> Sequence[SkillDefinition]:
        """Return every known skill."""

    async def get_skill_content(self, location: str) -> SkillDefinition | None:
        """Load the skill stored at ``location`` including its body."""
