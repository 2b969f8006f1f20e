"""Tests for annotation type and attribute filters."""
import re

import pytest
from richfilters.content import Annotation, Document
from richfilters.filters import (
    ATOMIC,
    AnnotationTypeOptions,
    UnknownAnnotationTypeError,
    filter_annotation_attributes,
    filter_annotation_ranges,
    filter_annotations,
    passes_attribute_whitelist,
    should_keep_annotation_by_attributes,
    should_keep_annotation_type,
    should_remove_image_annotation,
)


class TestPredicates:
    """Tests for the annotation rules."""

    def test_keep_annotation_type(self):
        assert should_keep_annotation_type({"LINK"}, "LINK")
        assert not should_keep_annotation_type({"LINK"}, "IMAGE")
        assert not should_keep_annotation_type({"LINK"}, None)

    def test_remove_image_annotation(self):
        assert should_remove_image_annotation("IMAGE", "unstyled")
        assert not should_remove_image_annotation("IMAGE", ATOMIC)
        assert not should_remove_image_annotation("LINK", "unstyled")


class TestFilterAnnotationRanges:
    """Tests for the generic annotation range filter."""

    def test_predicate_receives_block(self, image_document):
        seen = []

        def keep(doc, key, block):
            seen.append((key, block.key))
            return True

        assert filter_annotation_ranges(image_document, keep) is image_document
        assert ("1", "b") in seen
        assert ("3", "c") in seen

    def test_rejected_references_cleared(self, image_document):
        result = filter_annotation_ranges(image_document, lambda doc, key, block: key != "2")

        block = result.get_block("a")
        assert [char.annotation for char in block.characters] == [None] * 10
        assert [char.style for char in block.characters] == [char.style for char in image_document.get_block("a").characters]
        assert result.get_block("b") is image_document.get_block("b")
        assert result.annotations is image_document.annotations


class TestFilterAnnotations:
    """Tests for annotation type whitelisting."""

    def test_disabled_type_removed(self, image_document):
        result = filter_annotations(image_document, ["IMAGE"])

        assert result.get_block("a").annotation_at(6) is None
        assert result.get_block("b").annotation_at(0) == "1"
        assert result.get_block("a").text == "Hello link"

    def test_image_outside_atomic_removed_even_if_enabled(self, image_document):
        result = filter_annotations(image_document, ["IMAGE", "LINK"])

        block = result.get_block("c")
        assert block.annotation_at(1) is None
        assert block.text == "a📷"
        assert block.type == "unstyled"
        assert result.get_block("a") is image_document.get_block("a")
        assert result.get_block("b") is image_document.get_block("b")

    def test_single_character_image_in_paragraph(self, make_block):
        doc = Document.create(
            [make_block("a", "x", annotations=["1"])],
            annotations={"1": Annotation("IMAGE")},
        )

        block = filter_annotations(doc, ["IMAGE"]).get_block("a")

        assert block.annotation_at(0) is None
        assert block.type == "unstyled"
        assert block.text == "x"

    def test_dangling_reference_removed(self, make_block):
        doc = Document.create([make_block("a", "x", annotations=["9"])])
        assert filter_annotations(doc, ["LINK"]).get_block("a").annotation_at(0) is None


class TestAttributeWhitelist:
    """Tests for the regex attribute gate."""

    def test_all_patterns_match(self):
        entry = AnnotationTypeOptions(type="LINK", whitelist={"url": "^https?://", "rel": "^no"})
        assert passes_attribute_whitelist(entry, {"url": "https://x", "rel": "nofollow"})

    def test_one_pattern_fails(self):
        entry = AnnotationTypeOptions(type="LINK", whitelist={"url": "^https?://"})
        assert not passes_attribute_whitelist(entry, {"url": "javascript:alert(1)"})

    def test_search_semantics(self):
        entry = AnnotationTypeOptions(type="IMAGE", whitelist={"src": r"\.png"})
        assert passes_attribute_whitelist(entry, {"src": "/media/a.png?w=10"})

    def test_missing_attribute_tested_as_empty(self):
        entry = AnnotationTypeOptions(type="LINK", whitelist={"url": "^https?://"})
        assert not passes_attribute_whitelist(entry, {})
        assert passes_attribute_whitelist(AnnotationTypeOptions(type="LINK", whitelist={"url": ".*"}), {})

    def test_empty_whitelist_passes(self):
        assert passes_attribute_whitelist(AnnotationTypeOptions(type="LINK"), {"url": "anything"})

    def test_malformed_pattern_raises(self):
        entry = AnnotationTypeOptions(type="LINK", whitelist={"url": "(unclosed"})
        with pytest.raises(re.error):
            passes_attribute_whitelist(entry, {"url": "x"})

    def test_gate_keeps_types_without_entry(self, image_document):
        type_map = {"LINK": AnnotationTypeOptions(type="LINK", whitelist={"url": "^ftp://"})}
        assert should_keep_annotation_by_attributes(type_map, image_document, "1")
        assert not should_keep_annotation_by_attributes(type_map, image_document, "2")


class TestFilterAnnotationAttributes:
    """Tests for attribute filtering on the registry."""

    def test_unlisted_attributes_removed(self, make_block):
        doc = Document.create(
            [make_block("a", "x", annotations=["1"])],
            annotations={"1": Annotation("LINK", data={"url": "http://x", "title": "evil"})},
        )

        result = filter_annotation_attributes(doc, [AnnotationTypeOptions(type="LINK", attributes=["url"])])

        assert result.get_annotation("1").data == {"url": "http://x"}
        assert doc.get_annotation("1").data == {"url": "http://x", "title": "evil"}
        assert result.blocks is doc.blocks

    def test_missing_attributes_not_synthesized(self, image_document):
        entries = [
            AnnotationTypeOptions(type="IMAGE", attributes=["src", "alt"]),
            AnnotationTypeOptions(type="LINK", attributes=["url"]),
        ]

        result = filter_annotation_attributes(image_document, entries)

        assert result.get_annotation("1").data == {"src": "/a.png", "alt": "A"}
        assert result.get_annotation("3").data == {"src": "/b.png"}
        assert result.get_annotation("2").data == {"url": "https://example.com"}

    def test_unchanged_annotations_shared(self, image_document):
        entries = [
            AnnotationTypeOptions(type="IMAGE", attributes=["src", "alt", "width"]),
            AnnotationTypeOptions(type="LINK", attributes=["url", "title"]),
        ]
        assert filter_annotation_attributes(image_document, entries) is image_document

    def test_unreferenced_annotations_untouched(self, make_block):
        doc = Document.create(
            [make_block("a", "x", annotations=["1"])],
            annotations={
                "1": Annotation("LINK", data={"url": "http://x", "title": "t"}),
                "2": Annotation("EMBED", data={"url": "http://y", "html": "<iframe>"}),
            },
        )

        result = filter_annotation_attributes(doc, [AnnotationTypeOptions(type="LINK", attributes=["url"])])

        assert result.get_annotation("2") is doc.get_annotation("2")

    def test_referenced_type_without_entry_raises(self, image_document):
        with pytest.raises(UnknownAnnotationTypeError):
            filter_annotation_attributes(image_document, [AnnotationTypeOptions(type="LINK", attributes=["url"])])

    def test_dangling_reference_raises(self, make_block):
        doc = Document.create([make_block("a", "x", annotations=["9"])])
        with pytest.raises(UnknownAnnotationTypeError):
            filter_annotation_attributes(doc, [AnnotationTypeOptions(type="LINK")])

    def test_empty_attribute_list_empties_data(self, make_block):
        doc = Document.create(
            [make_block("a", "x", annotations=["1"])],
            annotations={"1": Annotation("LINK", data={"url": "http://x"})},
        )
        result = filter_annotation_attributes(doc, [AnnotationTypeOptions(type="LINK")])
        assert result.get_annotation("1").data == {}
