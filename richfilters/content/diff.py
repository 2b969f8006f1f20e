"""
Document Diff - Compare two document snapshots block by block.

Filters return documents that share unchanged blocks with their input, so
the diff first checks block identity and only compares fields of blocks that
were replaced. Hosts use this to re-render only what a filter touched.

Usage:
    from richfilters.content.diff import diff_documents

    diff = diff_documents(before, after)

    if diff:
        print(diff.summary())
        for change in diff.iter_changes():
            print(f"{change.key}: {change.status}")
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Iterator, Literal
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .block import Block
    from .document import Document


# =============================================================================
# Diff Models
# =============================================================================

class FieldChange(BaseModel):
    """Represents a change in a single field."""
    field: str
    old_value: Any
    new_value: Any

    def __repr__(self) -> str:
        return f"{self.field}: {self.old_value!r} → {self.new_value!r}"


class BlockDiff(BaseModel):
    """Diff for the block at one key."""
    key: str
    status: Literal["unchanged", "modified", "added", "removed"] = "unchanged"

    type_change: tuple[str, str] | None = None
    depth_change: tuple[int, int] | None = None
    text_change: tuple[str, str] | None = None
    # Number of character positions whose metadata differs
    characters_changed: int = 0

    @property
    def has_field_changes(self) -> bool:
        return any([
            self.type_change,
            self.depth_change,
            self.text_change,
            self.characters_changed,
        ])

    @property
    def field_changes(self) -> list[FieldChange]:
        changes = []
        if self.type_change:
            changes.append(FieldChange(field="type", old_value=self.type_change[0], new_value=self.type_change[1]))
        if self.depth_change:
            changes.append(FieldChange(field="depth", old_value=self.depth_change[0], new_value=self.depth_change[1]))
        if self.text_change:
            changes.append(FieldChange(field="text", old_value=self.text_change[0], new_value=self.text_change[1]))
        if self.characters_changed:
            changes.append(FieldChange(field="characters", old_value=None, new_value=self.characters_changed))
        return changes

    def __repr__(self) -> str:
        if self.status == "modified":
            fields = [fc.field for fc in self.field_changes]
            return f"BlockDiff({self.key!r}, modified: {fields})"
        return f"BlockDiff({self.key!r}, {self.status})"


class AnnotationDiff(BaseModel):
    """Data change of one registry entry."""
    key: str
    old_data: dict | None = None
    new_data: dict | None = None


class DocumentDiff(BaseModel):
    """Complete diff between two document snapshots."""
    blocks: list[BlockDiff] = Field(default_factory=list)
    annotations: list[AnnotationDiff] = Field(default_factory=list)

    @property
    def change_count(self) -> int:
        return sum(1 for _ in self.iter_changes()) + len(self.annotations)

    @property
    def is_identical(self) -> bool:
        return self.change_count == 0

    def iter_changes(self) -> Iterator[BlockDiff]:
        """Iterate changed blocks only."""
        for block in self.blocks:
            if block.status != "unchanged":
                yield block

    def get_changed_keys(self) -> list[str]:
        """Keys of blocks that were modified or added in the new document."""
        return [b.key for b in self.iter_changes() if b.status in ("modified", "added")]

    def get_changes_by_status(self) -> dict[str, list[BlockDiff]]:
        result: dict[str, list[BlockDiff]] = {
            "added": [],
            "removed": [],
            "modified": [],
        }
        for block in self.iter_changes():
            result[block.status].append(block)
        return result

    def summary(self) -> str:
        """Get human-readable summary of changes."""
        if self.is_identical:
            return "Documents are identical"

        by_status = self.get_changes_by_status()
        parts = []
        if by_status["modified"]:
            parts.append(f"{len(by_status['modified'])} modified")
        if by_status["added"]:
            parts.append(f"{len(by_status['added'])} added")
        if by_status["removed"]:
            parts.append(f"{len(by_status['removed'])} removed")
        if self.annotations:
            parts.append(f"{len(self.annotations)} annotations changed")

        return ", ".join(parts)

    def format_diff(self) -> str:
        """One line per block, prefixed with a status marker."""
        lines = []
        for block in self.blocks:
            status_char = {
                "unchanged": " ",
                "modified": "~",
                "added": "+",
                "removed": "-",
            }[block.status]
            line = f"{status_char} {block.key}"
            if block.status == "modified" and block.has_field_changes:
                fields = [fc.field for fc in block.field_changes]
                line += f" [{', '.join(fields)}]"
            lines.append(line)
        for annotation in self.annotations:
            lines.append(f"@ {annotation.key}: {annotation.old_data!r} → {annotation.new_data!r}")
        return "\n".join(lines)

    def __bool__(self) -> bool:
        """True if there are any changes."""
        return self.change_count > 0

    def __repr__(self) -> str:
        return f"DocumentDiff({self.summary()})"


# =============================================================================
# Diff Computation
# =============================================================================

def _compute_block_diff(key: str, block_a: "Block | None", block_b: "Block | None") -> BlockDiff:
    if block_a is None:
        return BlockDiff(key=key, status="added")
    if block_b is None:
        return BlockDiff(key=key, status="removed")
    # Filters share untouched blocks, identity means unchanged
    if block_a is block_b:
        return BlockDiff(key=key)

    node = BlockDiff(key=key)
    if block_a.type != block_b.type:
        node.type_change = (block_a.type, block_b.type)
    if block_a.depth != block_b.depth:
        node.depth_change = (block_a.depth, block_b.depth)
    if block_a.text != block_b.text:
        node.text_change = (block_a.text, block_b.text)

    chars_a, chars_b = block_a.characters, block_b.characters
    changed = sum(1 for a, b in zip(chars_a, chars_b) if a != b)
    node.characters_changed = changed + abs(len(chars_a) - len(chars_b))

    node.status = "modified" if node.has_field_changes else "unchanged"
    return node


def diff_documents(doc_a: "Document", doc_b: "Document") -> DocumentDiff:
    """
    Compute diff between two documents.

    Blocks are matched by key. The result lists blocks in the order of
    doc_b, followed by blocks only present in doc_a.

    Args:
        doc_a: Original document
        doc_b: New document

    Returns:
        DocumentDiff with per-block and per-annotation changes
    """
    diff = DocumentDiff()
    if doc_a is doc_b:
        diff.blocks = [BlockDiff(key=key) for key in doc_b.keys()]
        return diff

    for block_b in doc_b.blocks:
        diff.blocks.append(_compute_block_diff(block_b.key, doc_a.get_block(block_b.key), block_b))
    for block_a in doc_a.blocks:
        if doc_b.get_block(block_a.key) is None:
            diff.blocks.append(_compute_block_diff(block_a.key, block_a, None))

    if doc_a.annotations is not doc_b.annotations:
        for key in sorted(set(doc_a.annotations) | set(doc_b.annotations)):
            ann_a = doc_a.annotations.get(key)
            ann_b = doc_b.annotations.get(key)
            if ann_a is ann_b:
                continue
            old_data = dict(ann_a.data) if ann_a is not None else None
            new_data = dict(ann_b.data) if ann_b is not None else None
            if old_data != new_data:
                diff.annotations.append(AnnotationDiff(key=key, old_data=old_data, new_data=new_data))

    return diff
