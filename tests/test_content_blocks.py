"""Tests for content block payload validation and rendering"""

import uuid
from types import SimpleNamespace

import pytest

from portfolio_cms.schemas.content_block import BLOCK_TYPES
from portfolio_cms.services.content_blocks import (
    UNSUPPORTED_BLOCK,
    default_content,
    normalize_content,
    parse_content,
    render_block,
)
from portfolio_cms.services.exceptions import DomainValidationError


def block(block_type, content, order_index=0):
    return SimpleNamespace(id=uuid.uuid4(), block_type=block_type, content=content, order_index=order_index)


class TestDefaultContent:

    @pytest.mark.parametrize("block_type", BLOCK_TYPES)
    def test_defaults_are_valid_payloads(self, block_type):
        assert parse_content(block_type, default_content(block_type)) is not None

    def test_defaults_are_copies(self):
        first = default_content("gallery")
        first["images"].append({"url": "x.jpg"})

        assert default_content("gallery") == {"images": []}

    def test_unknown_type(self):
        with pytest.raises(DomainValidationError):
            default_content("carousel")


class TestNormalizeContent:

    def test_text(self):
        assert normalize_content("text", {"text": "<p>Obra</p>"}) == {"text": "<p>Obra</p>"}

    def test_quote_drops_missing_optional_fields(self):
        assert normalize_content("quote", {"quote": "Excelente"}) == {"quote": "Excelente"}

    def test_image_requires_url(self):
        with pytest.raises(DomainValidationError) as exc_info:
            normalize_content("image", {"caption": "Sem URL"})

        assert exc_info.value.errors[0]["field"] == "url"

    def test_video_type_must_be_known(self):
        with pytest.raises(DomainValidationError):
            normalize_content("video", {"url": "https://example.com/v.mp4", "type": "dailymotion"})

    def test_gallery_entries_are_validated(self):
        with pytest.raises(DomainValidationError) as exc_info:
            normalize_content("gallery", {"images": [{"caption": "missing url"}]})

        assert exc_info.value.errors[0]["field"].startswith("images.0")

    def test_two_columns_keeps_camel_case_keys(self):
        content = {
            "leftType": "image",
            "rightType": "text",
            "leftContent": {"url": "https://cdn.example.com/a.jpg", "alt": "Sala"},
            "rightContent": {"text": "Piso novo"},
        }

        normalized = normalize_content("two_columns", content)

        assert normalized["leftType"] == "image"
        assert normalized["leftContent"] == {"url": "https://cdn.example.com/a.jpg", "alt": "Sala"}
        assert normalized["rightContent"] == {"text": "Piso novo"}

    def test_two_columns_image_side_needs_url(self):
        content = {
            "leftType": "image",
            "rightType": "text",
            "leftContent": {"text": "not an image"},
            "rightContent": {"text": ""},
        }

        with pytest.raises(DomainValidationError):
            normalize_content("two_columns", content)

    def test_unknown_type(self):
        with pytest.raises(DomainValidationError, match="Unknown block type"):
            normalize_content("map", {})


class TestRenderBlock:

    def test_text_block(self):
        stored = block("text", {"text": "Olá"}, order_index=3)

        rendered = render_block(stored)

        assert rendered.id == stored.id
        assert rendered.block_type == "text"
        assert rendered.order_index == 3
        assert rendered.content == {"text": "Olá"}

    def test_gallery_skips_images_without_url(self):
        stored = block("gallery", {"images": [{"url": "a.jpg"}, {"url": ""}, {"url": "b.jpg", "caption": "B"}]})

        rendered = render_block(stored)

        assert rendered.content == {"images": [{"url": "a.jpg"}, {"url": "b.jpg", "caption": "B"}]}

    def test_unknown_type_renders_placeholder(self):
        stored = block("map", {"lat": 39.47, "lng": -0.37})

        rendered = render_block(stored)

        assert rendered.block_type == UNSUPPORTED_BLOCK
        assert rendered.original_type == "map"
        assert rendered.content == {}
        assert rendered.message

    def test_corrupt_payload_renders_placeholder(self):
        rendered = render_block(block("image", {"caption": "lost url"}))

        assert rendered.block_type == UNSUPPORTED_BLOCK
        assert rendered.original_type == "image"

    def test_missing_content_uses_empty_payload(self):
        rendered = render_block(block("quote", None))

        assert rendered.block_type == "quote"
        assert rendered.content == {"quote": ""}
