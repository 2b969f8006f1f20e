"""
Document - Ordered blocks plus the annotation registry they reference.

A Document is an immutable snapshot. Every operation that changes something
returns a new Document and reuses untouched blocks and annotations by
reference, so callers can compare block identity to find what changed.

Usage:
    doc = Document.create(
        [Block.create("a", "Hello"), Block.create("b", " ", type="atomic", characters=[img])],
        annotations={"1": Annotation("IMAGE", data={"src": "/a.png"})},
    )
    doc.get_key_after("a")      # "b"
    doc.annotation_type("1")    # "IMAGE"
"""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterable, Iterator, Mapping

from .annotation import Annotation
from .block import Block


@dataclass(frozen=True)
class Document:
    blocks: tuple[Block, ...] = ()
    annotations: dict[str, Annotation] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.blocks, tuple):
            object.__setattr__(self, "blocks", tuple(self.blocks))
        if len(self._index) != len(self.blocks):
            raise ValueError("Document block keys must be unique")

    @classmethod
    def create(
        cls,
        blocks: Iterable[Block] = (),
        annotations: Mapping[str, Annotation] | None = None,
    ) -> Document:
        return cls(blocks=tuple(blocks), annotations=dict(annotations or {}))

    # =========================================================================
    # Block access
    # =========================================================================

    @cached_property
    def _index(self) -> dict[str, int]:
        return {block.key: i for i, block in enumerate(self.blocks)}

    def keys(self) -> list[str]:
        return [block.key for block in self.blocks]

    def get_block(self, key: str) -> Block | None:
        i = self._index.get(key)
        return self.blocks[i] if i is not None else None

    def get_key_after(self, key: str) -> str | None:
        """Key of the block immediately after `key`, None at the end or if unknown."""
        i = self._index.get(key)
        if i is None or i + 1 >= len(self.blocks):
            return None
        return self.blocks[i + 1].key

    def get_key_before(self, key: str) -> str | None:
        i = self._index.get(key)
        if i is None or i == 0:
            return None
        return self.blocks[i - 1].key

    def merge_blocks(self, changed: Mapping[str, Block]) -> Document:
        """
        Replace blocks by key, keeping order.

        Returns self when `changed` is empty. Blocks not in `changed` are
        carried over as the same objects.
        """
        if not changed:
            return self
        unknown = set(changed) - set(self._index)
        if unknown:
            raise KeyError(f"Unknown block keys: {sorted(unknown)}")
        blocks = tuple(changed.get(block.key, block) for block in self.blocks)
        return Document(blocks=blocks, annotations=self.annotations)

    def plain_text(self, delimiter: str = "\n") -> str:
        return delimiter.join(block.text for block in self.blocks)

    # =========================================================================
    # Annotation registry
    # =========================================================================

    def get_annotation(self, key: str) -> Annotation:
        try:
            return self.annotations[key]
        except KeyError:
            raise KeyError(f"Unknown annotation key: {key!r}") from None

    def annotation_type(self, key: str) -> str | None:
        """Type of the annotation at `key`, None for a dangling reference."""
        annotation = self.annotations.get(key)
        return annotation.type if annotation is not None else None

    def replace_annotation_data(self, key: str, data: dict[str, Any]) -> Document:
        return self.merge_annotations({key: self.get_annotation(key).with_data(data)})

    def merge_annotations(self, changed: Mapping[str, Annotation]) -> Document:
        """Replace or add registry entries. Blocks are shared with self."""
        if not changed:
            return self
        annotations = dict(self.annotations)
        annotations.update(changed)
        return Document(blocks=self.blocks, annotations=annotations)

    def iter_annotation_keys(self) -> Iterator[str]:
        """Distinct annotation keys referenced by any character, in document order."""
        seen: set[str] = set()
        for block in self.blocks:
            for char in block.characters:
                key = char.annotation
                if key is not None and key not in seen:
                    seen.add(key)
                    yield key

    def __repr__(self) -> str:
        return f"Document({len(self.blocks)} blocks, {len(self.annotations)} annotations)"
