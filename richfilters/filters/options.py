"""Configuration for the filters."""

from __future__ import annotations
from pydantic import BaseModel, Field, field_validator

from .constants import ATOMIC, HORIZONTAL_RULE, UNSTYLED


class AnnotationTypeOptions(BaseModel):
    """
    An enabled annotation type.

    - attributes: data attributes kept on annotations of this type
    - whitelist: attribute name -> regular expression its value must match
    """
    type: str = Field(..., description="Annotation type, e.g. LINK or IMAGE")
    attributes: list[str] = Field(default=[], description="Data attributes to keep")
    whitelist: dict[str, str] = Field(default={}, description="Attribute name -> regex the value must match")


class FilterOptions(BaseModel):
    """
    What a document is allowed to contain.

    `unstyled` and `atomic` blocks are always allowed, atomic blocks are then
    filtered according to the annotation they hold.
    """
    max_list_nesting: int = Field(default=1, ge=0, description="Maximum block depth")
    enable_horizontal_rule: bool = Field(default=False, description="Allow HORIZONTAL_RULE annotations")
    block_types: list[str] = Field(default=[], description="Enabled block types")
    inline_styles: list[str] = Field(default=[], description="Enabled inline styles")
    annotation_types: list[AnnotationTypeOptions] = Field(default=[], description="Enabled annotation types")

    @field_validator("annotation_types", mode="before")
    @classmethod
    def _coerce_type_names(cls, value):
        if isinstance(value, (list, tuple)):
            return [{"type": v} if isinstance(v, str) else v for v in value]
        return value

    def enabled_block_types(self) -> set[str]:
        return set(self.block_types) | {UNSTYLED, ATOMIC}

    def enabled_annotation_type_names(self) -> set[str]:
        names = {entry.type for entry in self.annotation_types}
        if self.enable_horizontal_rule:
            names.add(HORIZONTAL_RULE)
        return names

    def annotation_type_map(self) -> dict[str, AnnotationTypeOptions]:
        """type -> entry. With duplicate entries the last one wins."""
        return {entry.type: entry for entry in self.annotation_types}
