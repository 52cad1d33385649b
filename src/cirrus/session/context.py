"""Running session context shared by startup and tools."""

from __future__ import annotations

from uuid import uuid4

from cirrus.auth.types import Authenticator, AuthRefreshRequest, AuthType
from cirrus.skills.types import SkillDiscoveryService


class SessionContext:
    """Stable execution context for one CLI session."""

    def __init__(
        self,
        *,
        authenticator: Authenticator,
        skill_discovery: SkillDiscoveryService,
        session_id: str | None = None,
    ) -> None:
        """Store session collaborators.

        Args:
            authenticator: Re-authentication provider.
            skill_discovery: Skill discovery service.
            session_id: Optional explicit session identifier.
        """
        self.session_id = session_id or str(uuid4())
        self._authenticator = authenticator
        self._skill_discovery = skill_discovery
        self._auth_type: AuthType | None = None
        self._active_skills: set[str] = set()

    @property
    def auth_type(self) -> AuthType | None:
        """Login strategy of the last successful refresh."""
        return self._auth_type

    async def refresh_auth(
        self, auth_type: AuthType, *, request: AuthRefreshRequest
    ) -> None:
        """Refresh credentials through the authenticator.

        Args:
            auth_type: Login strategy to refresh.
            request: Per-call refresh options.
        """
        await self._authenticator.refresh(auth_type, request)
        self._auth_type = auth_type

    def get_skill_discovery_service(self) -> SkillDiscoveryService:
        """Return the skill discovery service.

        Returns:
            Discovery collaborator.
        """
        return self._skill_discovery

    def activate_skill(self, name: str) -> None:
        """Mark a skill active for the rest of the session.

        Args:
            name: Skill name.
        """
        self._active_skills.add(name)

    def is_skill_active(self, name: str) -> bool:
        """Return whether a skill has been activated.

        Args:
            name: Skill name.

        Returns:
            Whether the skill is active.
        """
        return name in self._active_skills

    @property
    def active_skills(self) -> tuple[str, ...]:
        """Active skill names in sorted order."""
        return tuple(sorted(self._active_skills))
