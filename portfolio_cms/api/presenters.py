"""Conversion of assembled projects into API responses"""

from portfolio_cms.schemas.media import ImageResponse, VideoResponse
from portfolio_cms.schemas.project import (
    ComparisonPair,
    ComparisonResponse,
    ProjectDetailResponse,
    ProjectResponse,
)
from portfolio_cms.services.aggregation import AssembledProject
from portfolio_cms.services.before_after import BeforeAfterPairs
from portfolio_cms.services.content_blocks import render_block


def _images(rows):
    return [ImageResponse.model_validate(row) for row in rows]


def comparison_response(before_images, after_images) -> ComparisonResponse:
    slider = BeforeAfterPairs(before_images, after_images)
    return ComparisonResponse(
        available=slider.available,
        pair_count=slider.pair_count,
        pairs=[
            ComparisonPair(
                index=index,
                before=ImageResponse.model_validate(before),
                after=ImageResponse.model_validate(after),
            )
            for index, (before, after) in enumerate(slider.pairs())
        ],
    )


def project_detail_response(assembled: AssembledProject) -> ProjectDetailResponse:
    """Detail payload shared by the public page and the admin editor"""
    base = ProjectResponse.model_validate(assembled.project)
    return ProjectDetailResponse(
        **base.model_dump(),
        images=_images(assembled.images),
        gallery_images=_images(assembled.gallery_images),
        before_images=_images(assembled.before_images),
        after_images=_images(assembled.after_images),
        videos=[VideoResponse.model_validate(row) for row in assembled.videos],
        content_blocks=[render_block(block) for block in assembled.content_blocks],
        comparison=comparison_response(assembled.before_images, assembled.after_images),
    )
