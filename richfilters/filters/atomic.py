from __future__ import annotations
import logging
from typing import Iterable

from richfilters.content import Block, Document, EMPTY_CHARACTER

from .constants import ATOMIC, ATOMIC_PLACEHOLDER, UNSTYLED

logger = logging.getLogger(__name__)


def _normalize_atomic_block(block: Block) -> Block:
    """Single placeholder character, no styles, original offset-0 annotation."""
    if block.text == ATOMIC_PLACEHOLDER and not block.style_at(0):
        return block

    char = block.characters[0].without_styles() if block.characters else EMPTY_CHARACTER
    return block.replace(text=ATOMIC_PLACEHOLDER, characters=(char,))


def normalize_atomic_blocks(document: Document, enabled_annotation_types: Iterable[str]) -> Document:
    """
    Resets atomic blocks to unstyled based on which annotation types are
    enabled, and also normalises block text to a single "space" character.

    Shape normalization runs first so demotion always reads the annotation
    of the normalized block.
    """
    enabled_annotation_types = set(enabled_annotation_types)
    changed = {}
    demoted = 0

    for block in document.blocks:
        if block.type != ATOMIC:
            continue

        new_block = _normalize_atomic_block(block)

        key = new_block.annotation_at(0)
        annotation_type = document.annotation_type(key) if key is not None else None
        if annotation_type is None or annotation_type not in enabled_annotation_types:
            new_block = new_block.replace(type=UNSTYLED)
            demoted += 1

        if new_block is not block:
            changed[block.key] = new_block

    if changed:
        logger.debug(f"Normalized {len(changed)} atomic blocks, {demoted} reset to {UNSTYLED}")
    return document.merge_blocks(changed)
