"""
Player record shared with the host engine.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .roles import RoleName, parse_role


@dataclass(frozen=True)
class Player:
    """A participant as seen by the rules: identity, display name and role."""
    id: str
    name: str
    role: Optional[RoleName] = None  # None until roles are assigned

    def __str__(self) -> str:
        if self.role is None:
            return self.name
        return f"{self.name} ({self.role.value})"

    @property
    def has_role(self) -> bool:
        return self.role is not None

    def with_role(self, role: RoleName) -> "Player":
        """Return a copy holding role; the original is left untouched."""
        return replace(self, role=role)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Build a player from the mapping a host engine sends.

        Args:
            data: Mapping with "id" and "name" and optionally "role"

        Raises:
            UnknownRoleError: If "role" is set to an unrecognised name
        """
        role = data.get("role")
        return cls(
            id=str(data["id"]),
            name=data["name"],
            role=parse_role(role) if role else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping with the role as its display string."""
        data: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.role is not None:
            data["role"] = self.role.value
        return data
