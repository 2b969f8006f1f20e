"""
Annotation - Typed, attributed object referenced from characters.

Annotations (links, images, embeds, horizontal rules, ...) live once in the
document's registry and are shared by key between any number of characters.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Literal


Mutability = Literal["MUTABLE", "IMMUTABLE", "SEGMENTED"]


@dataclass(frozen=True)
class Annotation:
    type: str
    mutability: Mutability = "MUTABLE"
    data: dict[str, Any] = field(default_factory=dict)

    def with_data(self, data: dict[str, Any]) -> Annotation:
        return replace(self, data=dict(data))

    def __repr__(self) -> str:
        return f"Annotation({self.type!r}, {self.data!r})"
