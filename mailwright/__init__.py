"""mailwright: build and render MIME messages"""

from .models import Field, Header, Message, Part

__all__ = ["Field", "Header", "Part", "Message"]

__version__ = "0.1.0"
