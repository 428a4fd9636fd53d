"""Static educational content."""

from edustocks.content.lessons import LESSONS

__all__ = [
    "LESSONS",
]
