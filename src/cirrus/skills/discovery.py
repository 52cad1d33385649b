"""In-memory skill discovery service."""

from __future__ import annotations

from collections.abc import Iterable

from cirrus.skills.types import SkillDefinition


class InMemorySkillDiscovery:
    """Discovery service backed by pre-registered skill definitions."""

    def __init__(self, skills: Iterable[SkillDefinition] = ()) -> None:
        """Register initial skills.

        Args:
            skills: Definitions to register; later duplicates replace earlier ones.
        """
        self._skills: dict[str, SkillDefinition] = {}
        for skill in skills:
            self.register(skill)

    def register(self, skill: SkillDefinition) -> None:
        """Register or replace one skill by name.

        Args:
            skill: Skill definition to store.
        """
        self._skills[skill.name] = skill

    async def list_skills(self) -> tuple[SkillDefinition, ...]:
        """Return registered skills sorted by name, without bodies.

        Returns:
            Skill listing.
        """
        return tuple(
            self._skills[name].model_copy(update={"body": None})
            for name in sorted(self._skills)
        )

    async def get_skill_content(self, location: str) -> SkillDefinition | None:
        """Return the skill registered at ``location`` when it has a body.

        Args:
            location: Opaque skill locator from the listing.

        Returns:
            Full skill definition, or ``None`` when unknown or bodiless.
        """
        for skill in self._skills.values():
            if skill.location == location and skill.body is not None:
                return skill
        return None
