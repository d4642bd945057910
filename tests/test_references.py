"""Tests for image reference lists and upload content types."""

import pytest

from materials_catalog.domain.errors import ValidationError
from materials_catalog.domain.media import (
    append_references,
    join_references,
    normalize_references,
    remove_reference,
    resolve_content_type,
    split_references,
)


def test_append_references_keeps_existing_order() -> None:
    assert append_references("a,b", ["c"]) == "a,b,c"


def test_append_references_to_empty_list() -> None:
    assert append_references("", ["x"]) == "x"
    assert append_references(None, ["x", "y"]) == "x,y"


def test_append_references_drops_blank_segments() -> None:
    assert append_references(" a , ,b,", ["  c "]) == "a,b,c"


def test_remove_reference_keeps_order_of_rest() -> None:
    assert remove_reference("a,b,c", "b") == "a,c"


def test_remove_reference_of_last_item_leaves_empty_list() -> None:
    assert remove_reference("a", "a") == ""
    assert remove_reference("a,b", "missing") == "a,b"


def test_split_references_handles_empty_values() -> None:
    assert split_references(None) == []
    assert split_references(" , ") == []


def test_normalize_references_rejects_embedded_commas() -> None:
    with pytest.raises(ValidationError):
        normalize_references(["https://cdn.example/a,b.png"])


def test_join_references_trims_entries() -> None:
    assert join_references([" https://x/1.png", "", "https://x/2.png "]) == (
        "https://x/1.png,https://x/2.png"
    )


def test_resolve_content_type_uses_extension_for_generic_uploads() -> None:
    assert resolve_content_type("photo.JPG", "application/octet-stream") == "image/jpeg"
    assert resolve_content_type("tile.webp", None) == "image/webp"


def test_resolve_content_type_keeps_declared_type() -> None:
    assert resolve_content_type("photo.png", "image/bmp") == "image/bmp"
    assert resolve_content_type("notes", "") == "application/octet-stream"
