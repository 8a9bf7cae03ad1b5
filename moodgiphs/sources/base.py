"""Base class for image source providers."""

from abc import ABC, abstractmethod
from typing import List, Optional
from moodgiphs.models import Giph


class ImageSource(ABC):
    """Abstract base class for image source providers."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize the image source.

        Args:
            api_key: Optional API key for the source
        """
        self.api_key = api_key

    @abstractmethod
    def search(self, keyword: str) -> List[Giph]:
        """Search for images matching the keyword.

        Args:
            keyword: Mood keyword entered by the user

        Returns:
            List of Giph objects, in the order the provider returned them
        """
        pass

    @abstractmethod
    def get_source_name(self) -> str:
        """Get the name of this image source."""
        pass

    def is_available(self) -> bool:
        """Check if this source is available (has API key if required)."""
        return True
