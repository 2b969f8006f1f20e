"""
Filters - Whitelist-based normalization of rich-text documents.

Meant to be used when pasting unconstrained content.

This module provides:
- FilterOptions / AnnotationTypeOptions: What a document may contain
- filter_document: Block, style and annotation whitelisting pipeline
- filter_editor_state: Full pipeline including attributes and selection
- The individual filters, for custom pipelines
"""

from .constants import (
    UNSTYLED,
    ATOMIC,
    IMAGE,
    HORIZONTAL_RULE,
    ATOMIC_PLACEHOLDER,
    BLOCK_LEVEL_ANNOTATION_TYPES,
)
from .options import FilterOptions, AnnotationTypeOptions
from .blocks import promote_annotated_blocks, clamp_depth, reset_disallowed_block_types
from .styles import filter_styles
from .atomic import normalize_atomic_blocks
from .entities import (
    UnknownAnnotationTypeError,
    filter_annotation_ranges,
    should_keep_annotation_type,
    should_remove_image_annotation,
    filter_annotations,
    passes_attribute_whitelist,
    should_keep_annotation_by_attributes,
    filter_annotation_attributes,
)
from .selection import reconcile_selection, apply_document_with_selection
from .editor import filter_document, filter_editor_state

__all__ = [
    "UNSTYLED",
    "ATOMIC",
    "IMAGE",
    "HORIZONTAL_RULE",
    "ATOMIC_PLACEHOLDER",
    "BLOCK_LEVEL_ANNOTATION_TYPES",
    "FilterOptions",
    "AnnotationTypeOptions",
    "promote_annotated_blocks",
    "clamp_depth",
    "reset_disallowed_block_types",
    "filter_styles",
    "normalize_atomic_blocks",
    "UnknownAnnotationTypeError",
    "filter_annotation_ranges",
    "should_keep_annotation_type",
    "should_remove_image_annotation",
    "filter_annotations",
    "passes_attribute_whitelist",
    "should_keep_annotation_by_attributes",
    "filter_annotation_attributes",
    "reconcile_selection",
    "apply_document_with_selection",
    "filter_document",
    "filter_editor_state",
]
