"""DTOs for quote repository."""

from dataclasses import dataclass


@dataclass
class ZenQuote:
    text: str
    author: str
