"""Slug generation and uniqueness checks"""

import logging
import re
import unicodedata
from typing import Optional, Type
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import Project

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MAX_SLUG_LENGTH = 255


def is_valid_slug(slug: str) -> bool:
    """Lowercase letters, digits and single hyphens between them"""
    return bool(slug) and len(slug) <= MAX_SLUG_LENGTH and bool(SLUG_PATTERN.match(slug))


def generate_slug(title: str) -> str:
    """
    Generate a URL-friendly slug from a title.

    Accents are stripped after NFD normalization ("Reforma de Cocina" ->
    "reforma-de-cocina"); any run of other characters becomes one hyphen.

    Args:
        title: Title to convert

    Returns:
        Slug matching SLUG_PATTERN, or an empty string when nothing usable is left
    """
    if not title:
        return ""

    slug = unicodedata.normalize("NFD", title)
    slug = slug.encode("ascii", "ignore").decode("ascii")
    slug = slug.lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")

    if len(slug) > MAX_SLUG_LENGTH:
        slug = slug[:MAX_SLUG_LENGTH].rstrip("-")

    logger.debug(f"Generated slug '{slug}' from '{title[:50]}'")
    return slug


async def is_slug_taken(
    db: AsyncSession,
    slug: str,
    exclude_id: Optional[UUID] = None,
    model: Type = Project,
) -> bool:
    """
    Check whether another row already uses this exact slug.

    Query-then-write: a concurrent writer can still take the slug between
    this check and the insert; the unique constraint on the column decides.

    Args:
        db: Database session
        slug: Candidate slug
        exclude_id: Row being edited, which may keep its own slug
        model: Table to check (projects by default)

    Returns:
        True if a row with a different id has the slug
    """
    query = select(model.id).where(model.slug == slug)
    if exclude_id is not None:
        query = query.where(model.id != exclude_id)

    result = await db.execute(query.limit(1))
    return result.scalar_one_or_none() is not None
