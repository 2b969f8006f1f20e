from __future__ import annotations
import logging
from typing import Iterable

from richfilters.content import Document

logger = logging.getLogger(__name__)


def filter_styles(document: Document, enabled_styles: Iterable[str]) -> Document:
    """
    Removes all inline styles that use unavailable types.

    Only blocks where at least one style was removed are replaced.
    """
    enabled_styles = frozenset(enabled_styles)
    changed = {}

    for block in document.blocks:
        altered = False
        chars = []
        for char in block.characters:
            if char.style <= enabled_styles:
                chars.append(char)
                continue
            altered = True
            new_char = char
            for tag in char.style - enabled_styles:
                new_char = new_char.remove_style(tag)
            chars.append(new_char)

        if altered:
            changed[block.key] = block.replace(characters=tuple(chars))

    if changed:
        logger.debug(f"Removed disabled styles from {len(changed)} blocks")
    return document.merge_blocks(changed)
