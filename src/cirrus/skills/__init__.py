"""Skills package."""

from cirrus.skills.discovery import InMemorySkillDiscovery
from cirrus.skills.types import SkillDefinition, SkillDiscoveryService

__all__ = [
    "InMemorySkillDiscovery",
    "SkillDefinition",
    "SkillDiscoveryService",
]
