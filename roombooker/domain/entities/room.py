from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    capacity: int
    amenities: frozenset[str] = field(default_factory=frozenset)
    photo_url: str = ""
