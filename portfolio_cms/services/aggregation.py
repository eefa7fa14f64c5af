"""Assembly of a project's flat media rows into ordered, categorized collections"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List

IMAGE_PARTITIONS = ("gallery", "before", "after")


def _type_value(value: Any) -> Any:
    """Enum members and plain strings compare the same way"""
    return getattr(value, "value", value)


def order_key(row: Any):
    """Ascending order_index; id breaks ties so input order never leaks into output"""
    return (row.order_index, str(row.id))


def sort_by_order(rows: Iterable[Any]) -> List[Any]:
    return sorted(rows, key=order_key)


def partition_images(images: Iterable[Any]) -> dict:
    """
    Split image rows into gallery/before/after buckets, each sorted by order_index.

    Rows with an unknown image_type end up in no bucket.
    """
    buckets = {name: [] for name in IMAGE_PARTITIONS}
    for image in images:
        image_type = _type_value(image.image_type)
        if image_type in buckets:
            buckets[image_type].append(image)
    return {name: sort_by_order(rows) for name, rows in buckets.items()}


@dataclass
class AssembledProject:
    """View model of a project with its derived media collections"""

    project: Any
    images: List[Any] = field(default_factory=list)
    gallery_images: List[Any] = field(default_factory=list)
    before_images: List[Any] = field(default_factory=list)
    after_images: List[Any] = field(default_factory=list)
    videos: List[Any] = field(default_factory=list)
    content_blocks: List[Any] = field(default_factory=list)


def assemble_project(
    project: Any,
    images: Iterable[Any],
    videos: Iterable[Any],
    content_blocks: Iterable[Any] = (),
) -> AssembledProject:
    """
    Build the project view model from raw rows.

    Pure function: no I/O, and the same rows in any input order give the
    same output. Gaps in order_index are kept as they are.

    Args:
        project: Project row
        images: All image rows of the project, any order
        videos: All video rows of the project, any order
        content_blocks: All content block rows of the project, any order

    Returns:
        AssembledProject with partitioned and sorted collections
    """
    all_images = sort_by_order(images)
    buckets = partition_images(all_images)

    return AssembledProject(
        project=project,
        images=all_images,
        gallery_images=buckets["gallery"],
        before_images=buckets["before"],
        after_images=buckets["after"],
        videos=sort_by_order(videos),
        content_blocks=sort_by_order(content_blocks),
    )
