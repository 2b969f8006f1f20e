from __future__ import annotations
import logging

from richfilters.content import Document, EditorState, Selection

logger = logging.getLogger(__name__)


def reconcile_selection(old: Document, new: Document, selection: Selection) -> Selection:
    """
    Moves a collapsed selection whose block no longer exists to a valid block.

    Only collapsed selections are moved, which is the only kind of selection
    after a paste. The target is the first key, scanning the new document
    from the end, whose successor differs between the two documents: the
    block that preceded the removed region. The cursor goes to its end.

    If there is no such key the selection is returned unchanged and may not
    resolve in `new`.
    """
    if not selection.is_collapsed or new.get_block(selection.anchor_key) is not None:
        return selection

    for key in reversed(new.keys()):
        if old.get_key_after(key) != new.get_key_after(key):
            block = new.get_block(key)
            logger.debug(f"Moving selection from removed block {selection.anchor_key!r} to {key!r}")
            return selection.collapse_to(key, block.length)

    return selection


def apply_document_with_selection(editor_state: EditorState, document: Document) -> EditorState:
    """
    Applies the new document to the editor state, moving the selection to be
    on a valid block if needed.
    """
    selection = reconcile_selection(editor_state.document, document, editor_state.selection)
    return editor_state.with_document(document).with_selection(selection)
