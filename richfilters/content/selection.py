"""
Selection - Cursor / range position expressed as block keys and offsets.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .document import Document


@dataclass(frozen=True)
class Selection:
    """
    A selection is only meaningful against a document in which both
    anchor_key and focus_key resolve to blocks.
    """
    anchor_key: str
    anchor_offset: int
    focus_key: str
    focus_offset: int
    is_backward: bool = False

    @classmethod
    def collapsed(cls, key: str, offset: int = 0) -> Selection:
        return cls(anchor_key=key, anchor_offset=offset, focus_key=key, focus_offset=offset)

    @property
    def is_collapsed(self) -> bool:
        return self.anchor_key == self.focus_key and self.anchor_offset == self.focus_offset

    def collapse_to(self, key: str, offset: int) -> Selection:
        """Move both anchor and focus to (key, offset)."""
        return replace(
            self,
            anchor_key=key,
            anchor_offset=offset,
            focus_key=key,
            focus_offset=offset,
            is_backward=False,
        )

    def resolves_in(self, document: Document) -> bool:
        return (
            document.get_block(self.anchor_key) is not None
            and document.get_block(self.focus_key) is not None
        )

    def __repr__(self) -> str:
        if self.is_collapsed:
            return f"Selection({self.anchor_key!r}:{self.anchor_offset})"
        return (
            f"Selection({self.anchor_key!r}:{self.anchor_offset} -> "
            f"{self.focus_key!r}:{self.focus_offset})"
        )
