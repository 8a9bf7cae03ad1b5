"""Data models for Giphy search results."""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class Giph:
    """A single GIF returned by a mood search."""

    image_url: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
