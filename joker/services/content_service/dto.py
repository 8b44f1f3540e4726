"""DTOs for content service."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ContentKind(str, Enum):
    JOKE = "joke"
    QUOTE = "quote"


@dataclass(frozen=True)
class ContentResult:
    """A joke or a quote; only quotes carry an author."""

    content: str
    kind: ContentKind
    author: str | None = None

    def __post_init__(self):
        if self.kind is ContentKind.JOKE and self.author is not None:
            raise ValueError("jokes do not have an author")
        if self.kind is ContentKind.QUOTE and self.author is None:
            raise ValueError("quotes require an author")

    @classmethod
    def joke(cls, content: str) -> "ContentResult":
        return cls(content=content, kind=ContentKind.JOKE)

    @classmethod
    def quote(cls, content: str, author: str) -> "ContentResult":
        return cls(content=content, kind=ContentKind.QUOTE, author=author)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": self.content, "type": self.kind.value}
        if self.author is not None:
            data["author"] = self.author
        return data
