import pytest

from richfilters.content import Annotation, Block, CharacterMetadata, Document


def _block(key, text="", type="unstyled", depth=0, styles=None, annotations=None):
    """Block with per-character styles (list of lists) and annotation keys."""
    chars = []
    for i in range(len(text)):
        style = styles[i] if styles else ()
        annotation = annotations[i] if annotations else None
        chars.append(CharacterMetadata.create(style, annotation))
    return Block.create(key, text, type=type, depth=depth, characters=chars)


@pytest.fixture
def make_block():
    return _block


@pytest.fixture
def image_document():
    """Atomic image, a paragraph with a link, and a pasted image in a paragraph."""
    return Document.create(
        [
            _block("a", "Hello link", styles=[["BOLD"]] * 5 + [[]] * 5, annotations=[None] * 6 + ["2"] * 4),
            _block("b", " ", type="atomic", annotations=["1"]),
            _block("c", "a📷", annotations=[None, "3"]),
        ],
        annotations={
            "1": Annotation("IMAGE", data={"src": "/a.png", "alt": "A", "width": 100}),
            "2": Annotation("LINK", data={"url": "https://example.com", "title": "Example"}),
            "3": Annotation("IMAGE", data={"src": "/b.png"}),
        },
    )


@pytest.fixture
def messy_document():
    """Covers every filter: disallowed types, deep lists, styles, broken atomics."""
    return Document.create(
        [
            _block("h", "Title", type="header-one", styles=[["BOLD"]] * 5),
            _block("l1", "item", type="unordered-list-item", depth=4, styles=[["ITALIC", "BOLD"]] * 4),
            _block("q", "quote", type="blockquote"),
            _block("x", "xyz", type="atomic", styles=[["BOLD"], [], []], annotations=["1", "1", "1"]),
            _block("hr", " ", type="atomic", annotations=["4"]),
            _block("p", "image here", annotations=[None, "3"] + [None] * 8),
            _block("e", " ", type="atomic"),
            _block("lk", "go", annotations=["2", "2"]),
        ],
        annotations={
            "1": Annotation("IMAGE", data={"src": "/a.png", "alt": "A"}),
            "2": Annotation("LINK", data={"url": "https://example.com", "title": "evil"}),
            "3": Annotation("IMAGE", data={"src": "/b.png"}),
            "4": Annotation("HORIZONTAL_RULE", mutability="IMMUTABLE"),
        },
    )
