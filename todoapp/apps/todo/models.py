"""
Todo record model
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision (e.g. 2026-10-18T09:30:00.123Z)"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class Todo:
    """A single task record"""

    id: int
    text: str
    completed: bool = False
    created_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """JSON representation used by the HTTP API"""
        return {
            'id': self.id,
            'text': self.text,
            'completed': self.completed,
            'createdAt': self.created_at,
        }
