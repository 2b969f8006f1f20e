"""
Block-level filters: atomic promotion, depth clamping and block type reset.

Each filter takes a Document and returns a Document. Blocks that are left
alone are the same objects in the result, and a filter that changes nothing
returns its input.
"""

from __future__ import annotations
import logging
from typing import Iterable

from richfilters.content import Document

from .constants import ATOMIC, UNSTYLED

logger = logging.getLogger(__name__)


def promote_annotated_blocks(document: Document, block_level_types: Iterable[str]) -> Document:
    """
    Makes atomic blocks where they would be required for a block-level
    annotation to work correctly, when such an annotation exists at offset 0.
    Pasted images can end up on any block type.
    """
    block_level_types = set(block_level_types)
    changed = {}

    for block in document.blocks:
        key = block.annotation_at(0)
        if key is None or block.type == ATOMIC:
            continue
        if document.annotation_type(key) in block_level_types:
            changed[block.key] = block.replace(type=ATOMIC)

    if changed:
        logger.debug(f"Promoted {len(changed)} blocks to atomic")
    return document.merge_blocks(changed)


def clamp_depth(document: Document, max_list_nesting: int) -> Document:
    """Resets the depth of all the content to at most max_list_nesting."""
    changed = {
        block.key: block.replace(depth=max_list_nesting)
        for block in document.blocks
        if block.depth > max_list_nesting
    }

    if changed:
        logger.debug(f"Clamped depth of {len(changed)} blocks to {max_list_nesting}")
    return document.merge_blocks(changed)


def reset_disallowed_block_types(document: Document, enabled_block_types: Iterable[str]) -> Document:
    """Resets all blocks that use unavailable types to unstyled."""
    enabled_block_types = set(enabled_block_types)
    changed = {
        block.key: block.replace(type=UNSTYLED)
        for block in document.blocks
        if block.type not in enabled_block_types
    }

    if changed:
        logger.debug(f"Reset {len(changed)} blocks to {UNSTYLED}")
    return document.merge_blocks(changed)
