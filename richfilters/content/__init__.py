"""
Content - Immutable rich-text document model.

This module provides:
- CharacterMetadata: Inline styles and annotation reference of one character
- Block: Typed block of text with aligned character metadata
- Annotation: Typed, attributed object shared by key between characters
- Document: Ordered blocks plus the annotation registry
- Selection: Anchor / focus position over block keys
- EditorState: Document paired with its selection
- diff_documents: Block-level comparison of two documents
"""

from .character import CharacterMetadata, EMPTY_CHARACTER
from .block import Block
from .annotation import Annotation
from .document import Document
from .selection import Selection
from .editor_state import EditorState
from .diff import diff_documents, DocumentDiff, BlockDiff, AnnotationDiff, FieldChange

__all__ = [
    "CharacterMetadata",
    "EMPTY_CHARACTER",
    "Block",
    "Annotation",
    "Document",
    "Selection",
    "EditorState",
    "diff_documents",
    "DocumentDiff",
    "BlockDiff",
    "AnnotationDiff",
    "FieldChange",
]
