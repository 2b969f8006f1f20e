"""
CharacterMetadata - Per-character formatting state.

Each character of a block's text has exactly one CharacterMetadata holding
the inline style tags applied to it and an optional reference to an
annotation in the document's registry.

Instances are immutable. Operations return a new instance, or the same
instance when nothing would change, so unchanged characters keep identity.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterable


@dataclass(frozen=True)
class CharacterMetadata:
    """
    Formatting of a single character.

    Attributes:
        style: Inline style tags (e.g. "BOLD", "ITALIC")
        annotation: Key into the document's annotation registry, or None
    """
    style: frozenset[str] = field(default_factory=frozenset)
    annotation: str | None = None

    @classmethod
    def create(cls, style: Iterable[str] = (), annotation: str | None = None) -> CharacterMetadata:
        style = frozenset(style)
        if not style and annotation is None:
            return EMPTY_CHARACTER
        return cls(style=style, annotation=annotation)

    def has_style(self, tag: str) -> bool:
        return tag in self.style

    def remove_style(self, tag: str) -> CharacterMetadata:
        if tag not in self.style:
            return self
        return replace(self, style=self.style - {tag})

    def without_styles(self) -> CharacterMetadata:
        """Drop every style tag, keeping the annotation reference."""
        if not self.style:
            return self
        return replace(self, style=frozenset())

    def apply_annotation(self, annotation: str | None) -> CharacterMetadata:
        if annotation == self.annotation:
            return self
        return replace(self, annotation=annotation)

    def __repr__(self) -> str:
        parts = []
        if self.style:
            parts.append(f"style={sorted(self.style)!r}")
        if self.annotation is not None:
            parts.append(f"annotation={self.annotation!r}")
        return f"CharacterMetadata({', '.join(parts)})"


EMPTY_CHARACTER = CharacterMetadata()
