"""
Block - One ordered unit of document content.

A block has a type tag (unstyled, atomic, header-one, ...), a nesting depth,
its text and one CharacterMetadata per character of that text.

Usage:
    block = Block.create("a1", "Hello", type="header-two")
    bold = Block.create(
        "a2",
        "ab",
        characters=[CharacterMetadata.create(["BOLD"]), EMPTY_CHARACTER],
    )
"""

from __future__ import annotations
from dataclasses import dataclass, replace as _replace
from typing import Any, Iterable

from .character import CharacterMetadata, EMPTY_CHARACTER


@dataclass(frozen=True)
class Block:
    """
    Immutable content block.

    Invariants (checked on construction):
        - len(characters) == len(text)
        - depth >= 0
    """
    key: str
    type: str
    text: str
    depth: int
    characters: tuple[CharacterMetadata, ...]

    def __post_init__(self):
        if not isinstance(self.characters, tuple):
            object.__setattr__(self, "characters", tuple(self.characters))
        if len(self.characters) != len(self.text):
            raise ValueError(
                f"Block {self.key!r}: {len(self.characters)} characters for text of length {len(self.text)}"
            )
        if self.depth < 0:
            raise ValueError(f"Block {self.key!r}: depth must be non-negative, got {self.depth}")

    @classmethod
    def create(
        cls,
        key: str,
        text: str = "",
        *,
        type: str = "unstyled",
        depth: int = 0,
        characters: Iterable[CharacterMetadata] | None = None,
    ) -> Block:
        if characters is None:
            characters = (EMPTY_CHARACTER,) * len(text)
        return cls(key=key, type=type, text=text, depth=depth, characters=tuple(characters))

    @property
    def length(self) -> int:
        return len(self.text)

    def annotation_at(self, offset: int) -> str | None:
        """Annotation key of the character at offset, None if out of range."""
        if 0 <= offset < len(self.characters):
            return self.characters[offset].annotation
        return None

    def style_at(self, offset: int) -> frozenset[str]:
        if 0 <= offset < len(self.characters):
            return self.characters[offset].style
        return frozenset()

    def replace(self, **changes: Any) -> Block:
        """Return a copy with the given fields changed."""
        return _replace(self, **changes)

    def __repr__(self) -> str:
        preview = self.text[:30] + "..." if len(self.text) > 30 else self.text
        return f"Block({self.key!r}, {self.type}, depth={self.depth}, {preview!r})"
