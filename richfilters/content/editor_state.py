"""
EditorState - A document paired with the selection the host tracks on it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from .document import Document
from .selection import Selection


@dataclass(frozen=True)
class EditorState:
    document: Document
    selection: Selection

    @classmethod
    def create(cls, document: Document, selection: Selection | None = None) -> EditorState:
        """
        Pair a document with a selection.

        Without an explicit selection the cursor is collapsed at the start of
        the first block. An empty document needs an explicit selection.
        """
        if selection is None:
            if not document.blocks:
                raise ValueError("Cannot place a default selection in an empty document")
            selection = Selection.collapsed(document.blocks[0].key, 0)
        return cls(document=document, selection=selection)

    def with_document(self, document: Document) -> EditorState:
        if document is self.document:
            return self
        return replace(self, document=document)

    def with_selection(self, selection: Selection) -> EditorState:
        if selection is self.selection:
            return self
        return replace(self, selection=selection)
