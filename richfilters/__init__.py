from .content import (
    CharacterMetadata,
    EMPTY_CHARACTER,
    Block,
    Annotation,
    Document,
    Selection,
    EditorState,
    diff_documents,
)
from .filters import (
    FilterOptions,
    AnnotationTypeOptions,
    UnknownAnnotationTypeError,
    filter_document,
    filter_editor_state,
    filter_annotation_attributes,
    passes_attribute_whitelist,
    reconcile_selection,
)

__all__ = [
    "CharacterMetadata",
    "EMPTY_CHARACTER",
    "Block",
    "Annotation",
    "Document",
    "Selection",
    "EditorState",
    "diff_documents",
    "FilterOptions",
    "AnnotationTypeOptions",
    "UnknownAnnotationTypeError",
    "filter_document",
    "filter_editor_state",
    "filter_annotation_attributes",
    "passes_attribute_whitelist",
    "reconcile_selection",
]
