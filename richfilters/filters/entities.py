"""
Annotation filters.

Annotations are removed from characters (the reference is cleared) rather
than from the registry. Attribute filtering replaces registry entries.
"""

from __future__ import annotations
import logging
import re
from typing import Any, Callable, Iterable, Mapping

from richfilters.content import Block, Document

from .constants import ATOMIC, IMAGE
from .options import AnnotationTypeOptions

logger = logging.getLogger(__name__)


class UnknownAnnotationTypeError(Exception):
    pass


AnnotationPredicate = Callable[[Document, str, Block], bool]


def filter_annotation_ranges(document: Document, predicate: AnnotationPredicate) -> Document:
    """
    Clears annotation references for which `predicate(document, key, block)`
    returns False. Text and styles are left as they are.
    """
    changed = {}

    for block in document.blocks:
        altered = False
        chars = []
        for char in block.characters:
            key = char.annotation
            if key is not None and not predicate(document, key, block):
                altered = True
                char = char.apply_annotation(None)
            chars.append(char)

        if altered:
            changed[block.key] = block.replace(characters=tuple(chars))

    if changed:
        logger.debug(f"Removed annotations from {len(changed)} blocks")
    return document.merge_blocks(changed)


def should_keep_annotation_type(enabled_types: Iterable[str], annotation_type: str | None) -> bool:
    return annotation_type is not None and annotation_type in enabled_types


def should_remove_image_annotation(annotation_type: str | None, block_type: str) -> bool:
    """
    Images should only be in atomic blocks.
    This only removes the image annotation, not the camera emoji (📷) that a
    paste inserts in the text. Removing it would mean dropping 2 characters
    (1 code point) from the text and the 2 matching metadata entries.
    """
    return annotation_type == IMAGE and block_type != ATOMIC


def filter_annotations(document: Document, enabled_annotation_types: Iterable[str]) -> Document:
    """
    Reset all annotation types (images, links, documents, embeds) that are
    unavailable, and image annotations placed outside of atomic blocks, which
    can happen on paste.

    A better approach would be to split the block where the image is and
    create an atomic block there. Content is never relocated here.
    """
    enabled_annotation_types = set(enabled_annotation_types)

    def keep(doc: Document, key: str, block: Block) -> bool:
        annotation_type = doc.annotation_type(key)
        return (
            should_keep_annotation_type(enabled_annotation_types, annotation_type)
            and not should_remove_image_annotation(annotation_type, block.type)
        )

    return filter_annotation_ranges(document, keep)


# =============================================================================
# Attributes
# =============================================================================

def passes_attribute_whitelist(entry: AnnotationTypeOptions, data: Mapping[str, Any]) -> bool:
    """
    True if every whitelisted attribute matches its pattern.

    Patterns are searched anywhere in the value, anchor them to match the
    whole value. A missing attribute is tested as the empty string.
    """
    for attr, pattern in entry.whitelist.items():
        value = data.get(attr)
        if re.compile(pattern).search("" if value is None else str(value)) is None:
            return False
    return True


def should_keep_annotation_by_attributes(
    type_map: Mapping[str, AnnotationTypeOptions],
    document: Document,
    key: str,
) -> bool:
    """Attribute gate. Types without an entry are left to the type filter."""
    annotation = document.annotations.get(key)
    if annotation is None:
        return True
    entry = type_map.get(annotation.type)
    if entry is None:
        return True
    return passes_attribute_whitelist(entry, annotation.data)


def filter_annotation_attributes(
    document: Document,
    annotation_types: Iterable[AnnotationTypeOptions],
) -> Document:
    """
    Filters attributes on annotations to only retain the ones whitelisted.

    Only annotations referenced from the document's characters are
    processed. Each of them must have an entry in `annotation_types`, which
    holds after `filter_annotations` ran with the same types.
    """
    type_map = {entry.type: entry for entry in annotation_types}
    changed = {}

    for key in document.iter_annotation_keys():
        annotation = document.annotations.get(key)
        if annotation is None:
            raise UnknownAnnotationTypeError(f"Annotation {key!r} is referenced but not in the registry")
        entry = type_map.get(annotation.type)
        if entry is None:
            raise UnknownAnnotationTypeError(
                f"Annotation {key!r} has type {annotation.type!r} which is not enabled"
            )

        # Attributes missing from the data are not added with empty values.
        data = {attr: annotation.data[attr] for attr in entry.attributes if attr in annotation.data}
        if data != annotation.data:
            changed[key] = annotation.with_data(data)

    if changed:
        logger.debug(f"Filtered attributes of {len(changed)} annotations")
    return document.merge_annotations(changed)
