"""Per-type validation and rendering of content block payloads"""

import copy
import logging
from typing import Any, Dict

from pydantic import ValidationError

from portfolio_cms.schemas.content_block import (
    CONTENT_MODELS,
    GalleryContent,
    ImageContent,
    QuoteContent,
    RenderedBlock,
    TextContent,
    TwoColumnsContent,
    VideoContent,
)
from portfolio_cms.services.exceptions import DomainValidationError

logger = logging.getLogger(__name__)

UNSUPPORTED_BLOCK = "unsupported"

DEFAULT_CONTENT = {
    "text": {"text": ""},
    "image": {"url": "", "caption": "", "alt": ""},
    "gallery": {"images": []},
    "video": {"url": "", "type": "youtube", "title": "", "description": ""},
    "quote": {"quote": "", "author": "", "role": ""},
    "two_columns": {
        "leftType": "text",
        "rightType": "text",
        "leftContent": {"text": ""},
        "rightContent": {"text": ""},
    },
}


def default_content(block_type: str) -> Dict[str, Any]:
    """Empty payload a freshly added block starts with"""
    if block_type not in DEFAULT_CONTENT:
        raise DomainValidationError(f"Unknown block type '{block_type}'")
    return copy.deepcopy(DEFAULT_CONTENT[block_type])


def parse_content(block_type: str, content: Dict[str, Any]):
    """
    Validate a payload against the model for its block type.

    Returns:
        The typed payload model

    Raises:
        DomainValidationError: Unknown block type or payload of the wrong shape
    """
    model = CONTENT_MODELS.get(block_type)
    if model is None:
        raise DomainValidationError(f"Unknown block type '{block_type}'")

    try:
        return model.model_validate(content)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]) or "content", "message": err["msg"]}
            for err in e.errors()
        ]
        raise DomainValidationError(
            f"Invalid content for block type '{block_type}'", errors=errors
        )


def normalize_content(block_type: str, content: Dict[str, Any]) -> Dict[str, Any]:
    """Validated payload as it is stored"""
    return parse_content(block_type, content).model_dump(by_alias=True, exclude_none=True)


def _unsupported(block: Any, message: str) -> RenderedBlock:
    return RenderedBlock(
        id=block.id,
        block_type=UNSUPPORTED_BLOCK,
        order_index=block.order_index,
        original_type=block.block_type,
        message=message,
    )


def render_block(block: Any) -> RenderedBlock:
    """
    Prepare a stored block for public display.

    Unknown block types, and stored payloads that no longer match their
    type, render as an "unsupported" placeholder instead of failing.
    """
    try:
        payload = parse_content(block.block_type, block.content or {})
    except DomainValidationError as e:
        logger.warning(f"Rendering block {block.id} as unsupported: {e}")
        return _unsupported(block, str(e))

    if isinstance(payload, GalleryContent):
        # Gallery entries without an uploaded image are skipped
        content = {"images": [img.model_dump(exclude_none=True) for img in payload.images if img.url]}
    elif isinstance(payload, TwoColumnsContent):
        content = payload.model_dump(by_alias=True, exclude_none=True)
    elif isinstance(payload, (TextContent, QuoteContent, VideoContent, ImageContent)):
        content = payload.model_dump(exclude_none=True)
    else:
        return _unsupported(block, f"Unsupported block type '{block.block_type}'")

    return RenderedBlock(
        id=block.id,
        block_type=block.block_type,
        order_index=block.order_index,
        content=content,
    )
