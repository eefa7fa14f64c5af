"""Project image and video service: uploads, details, ordering and deletion"""

import logging
from typing import Any, Callable, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_cms.models import ImageType, Project, ProjectImage, ProjectVideo, VideoType
from portfolio_cms.schemas.media import ImageUpdate, OrderItem, VideoCreate, VideoUpdate
from portfolio_cms.services.aggregation import sort_by_order
from portfolio_cms.services.exceptions import NotFoundError, OrderingError
from portfolio_cms.services.ordering import (
    OrderAssignment,
    apply_order_assignments,
    index_of,
    resequence,
    swap_with_neighbor,
)
from portfolio_cms.services.storage_service import StorageService
from portfolio_cms.services.video_urls import thumbnail_url, to_embed_url

logger = logging.getLogger(__name__)


async def next_order_index(db: AsyncSession, model, *filters) -> int:
    """Position after the current last row matching filters (0 for an empty sequence)"""
    result = await db.execute(select(func.max(model.order_index)).where(*filters))
    current = result.scalar()
    return 0 if current is None else current + 1


def check_order_items(
    rows: Sequence, items: Sequence[OrderItem], partition: Optional[Callable[[Any], Any]] = None
) -> List[OrderAssignment]:
    """
    Validate explicit order values against the sequence being edited.

    Every id must belong to rows and appear once. After the assignments,
    order_index values must stay unique inside each partition (the whole
    sequence when partition is None), counting the untouched rows too.

    Raises:
        OrderingError: If any of these checks fail
    """
    by_id = {row.id: row for row in rows}
    unknown = [item.id for item in items if item.id not in by_id]
    if unknown:
        raise OrderingError(f"Items {unknown} are not part of this sequence")

    seen = set()
    duplicates = []
    for item in items:
        if item.id in seen:
            duplicates.append(item.id)
        seen.add(item.id)
    if duplicates:
        raise OrderingError(f"Items {duplicates} appear more than once")

    final = {row.id: row.order_index for row in rows}
    final.update((item.id, item.order_index) for item in items)

    taken = {}
    for row in rows:
        key = (partition(row) if partition else None, final[row.id])
        if key in taken:
            raise OrderingError(f"order_index {final[row.id]} would be shared by {taken[key]} and {row.id}")
        taken[key] = row.id

    return [OrderAssignment(item.id, item.order_index) for item in items]


def image_partition(image: ProjectImage) -> ImageType:
    return image.image_type


class MediaService:
    """Service for managing project images and videos"""

    def __init__(self, db: AsyncSession, storage: Optional[StorageService] = None):
        self.db = db
        self.storage = storage

    async def _require_project(self, project_id: UUID) -> Project:
        project = await self.db.get(Project, project_id)
        if not project:
            raise NotFoundError("Project", project_id)
        return project

    # Images

    async def list_images(self, project_id: UUID, image_type: Optional[str] = None) -> List[ProjectImage]:
        """Images of a project; with image_type, only that partition, in display order"""
        query = select(ProjectImage).where(ProjectImage.project_id == project_id)
        if image_type is not None:
            query = query.where(ProjectImage.image_type == ImageType(image_type))
        result = await self.db.execute(query)
        return sort_by_order(result.scalars().all())

    async def get_image(self, image_id: UUID) -> ProjectImage:
        image = await self.db.get(ProjectImage, image_id)
        if not image:
            raise NotFoundError("Image", image_id)
        return image

    async def upload_image(
        self,
        project_id: UUID,
        file_name: str,
        content_type: str,
        data: bytes,
        image_type: str = "gallery",
        caption: Optional[str] = None,
        alt_text: Optional[str] = None,
    ) -> ProjectImage:
        """
        Store an image file under {project_id}/{image_type}/ and append it to
        the end of its partition.

        Raises:
            NotFoundError: If the project does not exist
            StorageError: If the file is rejected or the upload fails
        """
        await self._require_project(project_id)
        partition = ImageType(image_type)
        self.storage.validate_file(len(data), content_type, kind="image")

        path = self.storage.build_path(str(project_id), partition.value, file_name, content_type)
        uploaded = self.storage.upload(path, data, content_type)

        image = ProjectImage(
            project_id=project_id,
            image_url=uploaded["public_url"],
            image_type=partition,
            caption=caption,
            alt_text=alt_text,
            order_index=await next_order_index(
                self.db,
                ProjectImage,
                ProjectImage.project_id == project_id,
                ProjectImage.image_type == partition,
            ),
        )
        self.db.add(image)
        await self.db.commit()
        await self.db.refresh(image)

        logger.info(f"Uploaded {partition.value} image {image.id} for project {project_id}")
        return image

    async def update_image(self, image_id: UUID, data: ImageUpdate) -> ProjectImage:
        """
        Update caption, alt text, partition or position of an image.

        Moving to another partition appends the image at the end of it unless
        an explicit order_index is given.

        Raises:
            NotFoundError: If the image does not exist
            OrderingError: If the explicit order_index is taken in the target partition
        """
        image = await self.get_image(image_id)
        fields = data.model_dump(exclude_unset=True)

        new_type = fields.pop("image_type", None)
        target = ImageType(new_type) if new_type is not None else image.image_type
        in_target = (
            ProjectImage.project_id == image.project_id,
            ProjectImage.image_type == target,
            ProjectImage.id != image.id,
        )

        order_index = fields.get("order_index")
        if order_index is not None:
            result = await self.db.execute(
                select(ProjectImage.id).where(*in_target, ProjectImage.order_index == order_index)
            )
            holder = result.scalars().first()
            if holder is not None:
                raise OrderingError(f"order_index {order_index} is already used by image {holder}")
        elif target != image.image_type:
            fields["order_index"] = await next_order_index(self.db, ProjectImage, *in_target)
        image.image_type = target

        for field, value in fields.items():
            if field == "order_index" and value is None:
                continue
            setattr(image, field, value)

        await self.db.commit()
        await self.db.refresh(image)
        logger.info(f"Updated image {image.id}")
        return image

    async def delete_image(self, image_id: UUID) -> None:
        """Delete the image row, then its stored file (best-effort)"""
        image = await self.get_image(image_id)
        image_url = image.image_url

        await self.db.execute(delete(ProjectImage).where(ProjectImage.id == image.id))
        await self.db.commit()

        if self.storage is not None:
            self.storage.remove_quietly(image_url)
        logger.info(f"Deleted image {image_id}")

    async def reorder_images(
        self, project_id: UUID, image_type: str, from_index: int, to_index: int
    ) -> List[OrderAssignment]:
        """Drag-and-drop move inside one partition; the partition is renumbered 0..N-1"""
        await self._require_project(project_id)
        images = await self.list_images(project_id, image_type)
        assignments = resequence(images, from_index, to_index)
        await apply_order_assignments(self.db, ProjectImage, assignments)
        return assignments

    async def nudge_image(self, image_id: UUID, direction: str) -> List[OrderAssignment]:
        """Swap an image with its neighbor in the same partition"""
        image = await self.get_image(image_id)
        images = await self.list_images(image.project_id, image.image_type.value)
        assignments = swap_with_neighbor(images, index_of(images, image.id), direction)
        await apply_order_assignments(self.db, ProjectImage, assignments)
        return assignments

    async def set_image_order(self, project_id: UUID, items: Sequence[OrderItem]) -> List[OrderAssignment]:
        await self._require_project(project_id)
        assignments = check_order_items(await self.list_images(project_id), items, partition=image_partition)
        await apply_order_assignments(self.db, ProjectImage, assignments)
        return assignments

    # Videos

    async def list_videos(self, project_id: UUID) -> List[ProjectVideo]:
        result = await self.db.execute(select(ProjectVideo).where(ProjectVideo.project_id == project_id))
        return sort_by_order(result.scalars().all())

    async def get_video(self, video_id: UUID) -> ProjectVideo:
        video = await self.db.get(ProjectVideo, video_id)
        if not video:
            raise NotFoundError("Video", video_id)
        return video

    async def _append_video(self, video: ProjectVideo) -> ProjectVideo:
        video.order_index = await next_order_index(
            self.db, ProjectVideo, ProjectVideo.project_id == video.project_id
        )
        self.db.add(video)
        await self.db.commit()
        await self.db.refresh(video)
        return video

    async def add_video(self, project_id: UUID, data: VideoCreate) -> ProjectVideo:
        """
        Attach a YouTube or Vimeo video. The page URL is stored as its
        embeddable player URL.

        Raises:
            DomainValidationError: If no video id can be extracted from the URL
        """
        await self._require_project(project_id)
        embed_url = to_embed_url(data.video_url, data.video_type)

        video = await self._append_video(ProjectVideo(
            project_id=project_id,
            video_url=embed_url,
            video_type=VideoType(data.video_type),
            title=data.title,
            description=data.description,
            thumbnail_url=thumbnail_url(data.video_url, data.video_type),
        ))
        logger.info(f"Added {data.video_type} video {video.id} to project {project_id}")
        return video

    async def upload_video(
        self,
        project_id: UUID,
        file_name: str,
        content_type: str,
        data: bytes,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ProjectVideo:
        """Store a video file under {project_id}/videos/ and append it to the video list"""
        await self._require_project(project_id)
        self.storage.validate_file(len(data), content_type, kind="video")

        path = self.storage.build_path(str(project_id), "videos", file_name, content_type)
        uploaded = self.storage.upload(path, data, content_type)

        video = await self._append_video(ProjectVideo(
            project_id=project_id,
            video_url=uploaded["public_url"],
            video_type=VideoType.UPLOAD,
            title=title,
            description=description,
        ))
        logger.info(f"Uploaded video {video.id} for project {project_id}")
        return video

    async def update_video(self, video_id: UUID, data: VideoUpdate) -> ProjectVideo:
        video = await self.get_video(video_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if field == "order_index" and value is None:
                continue
            setattr(video, field, value)

        await self.db.commit()
        await self.db.refresh(video)
        logger.info(f"Updated video {video.id}")
        return video

    async def delete_video(self, video_id: UUID) -> None:
        """Delete the video row; uploaded files are then removed from storage (best-effort)"""
        video = await self.get_video(video_id)
        video_url, video_type = video.video_url, video.video_type

        await self.db.execute(delete(ProjectVideo).where(ProjectVideo.id == video.id))
        await self.db.commit()

        if video_type == VideoType.UPLOAD and self.storage is not None:
            self.storage.remove_quietly(video_url)
        logger.info(f"Deleted video {video_id}")

    async def reorder_videos(self, project_id: UUID, from_index: int, to_index: int) -> List[OrderAssignment]:
        await self._require_project(project_id)
        videos = await self.list_videos(project_id)
        assignments = resequence(videos, from_index, to_index)
        await apply_order_assignments(self.db, ProjectVideo, assignments)
        return assignments

    async def nudge_video(self, video_id: UUID, direction: str) -> List[OrderAssignment]:
        video = await self.get_video(video_id)
        videos = await self.list_videos(video.project_id)
        assignments = swap_with_neighbor(videos, index_of(videos, video.id), direction)
        await apply_order_assignments(self.db, ProjectVideo, assignments)
        return assignments
