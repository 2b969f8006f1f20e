"""
Filter pipelines.

filter_document applies the whitelists of a FilterOptions to a Document.
filter_editor_state is the full paste-time pipeline over an EditorState:
attribute gate, filter_document, attribute filtering and selection fix-up.

Usage:
    options = FilterOptions(
        block_types=["header-two", "unordered-list-item"],
        inline_styles=["BOLD"],
        annotation_types=[{"type": "LINK", "attributes": ["url"], "whitelist": {"url": "^https?://"}}],
    )
    editor_state = filter_editor_state(editor_state, options)
"""

from __future__ import annotations
import logging

from richfilters.content import Document, EditorState, diff_documents

from .atomic import normalize_atomic_blocks
from .blocks import clamp_depth, promote_annotated_blocks, reset_disallowed_block_types
from .constants import BLOCK_LEVEL_ANNOTATION_TYPES, HORIZONTAL_RULE
from .entities import (
    filter_annotation_attributes,
    filter_annotation_ranges,
    filter_annotations,
    should_keep_annotation_by_attributes,
)
from .options import AnnotationTypeOptions, FilterOptions
from .selection import apply_document_with_selection
from .styles import filter_styles

logger = logging.getLogger(__name__)


def filter_document(document: Document, options: FilterOptions) -> Document:
    """
    Applies the block, style and annotation whitelists.

    The order matters: promotion runs before the block type reset so that
    block-level annotations survive it, and atomic blocks are normalized
    before annotations are filtered.

    Line breaks are not filtered.
    """
    enabled_annotation_types = options.enabled_annotation_type_names()

    document = promote_annotated_blocks(document, BLOCK_LEVEL_ANNOTATION_TYPES)
    document = clamp_depth(document, options.max_list_nesting)
    document = reset_disallowed_block_types(document, options.enabled_block_types())
    document = filter_styles(document, options.inline_styles)
    document = normalize_atomic_blocks(document, enabled_annotation_types)
    document = filter_annotations(document, enabled_annotation_types)

    return document


def _attribute_entries(options: FilterOptions) -> list[AnnotationTypeOptions]:
    entries = list(options.annotation_types)
    if options.enable_horizontal_rule and HORIZONTAL_RULE not in options.annotation_type_map():
        entries.append(AnnotationTypeOptions(type=HORIZONTAL_RULE))
    return entries


def filter_editor_state(editor_state: EditorState, options: FilterOptions) -> EditorState:
    """
    Applies whitelist and blacklist operations to the editor content, so the
    resulting editor state is shaped according to `options`.

    Annotations failing their attribute whitelist are dropped before the
    block filters run, so an atomic block that loses its annotation this way
    is reset to unstyled.
    """
    document = editor_state.document
    type_map = options.annotation_type_map()

    document = filter_annotation_ranges(
        document,
        lambda doc, key, block: should_keep_annotation_by_attributes(type_map, doc, key),
    )
    document = filter_document(document, options)
    document = filter_annotation_attributes(document, _attribute_entries(options))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Filtered editor state: {diff_documents(editor_state.document, document).summary()}")

    return apply_document_with_selection(editor_state, document)
