"""
User model as reported by the clinic API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class User:
    """Authenticated user. Only ``role`` matters to navigation."""
    id: str
    name: str
    role: str
    email: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """Build from an API payload (``_id`` or ``id``)."""
        known = {"_id", "id", "name", "role", "email"}
        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            name=data.get("name", ""),
            role=data.get("role", ""),
            email=data.get("email"),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"_id": self.id, "name": self.name, "role": self.role}
        if self.email is not None:
            data["email"] = self.email
        data.update(self.extra)
        return data
