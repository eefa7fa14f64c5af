"""Before/after comparison pairing"""

from typing import Any, List, Optional, Sequence, Tuple


class BeforeAfterPairs:
    """
    Pairs independently ordered before and after image sequences by position.

    A single shared index addresses both sequences; next/previous move both
    pointers in lockstep. When either sequence is empty the comparison is
    unavailable: navigation does nothing and current() returns None.
    """

    def __init__(self, before_images: Sequence[Any], after_images: Sequence[Any], index: int = 0):
        self.before_images = list(before_images)
        self.after_images = list(after_images)
        self.index = 0
        self.go_to(index)

    @property
    def pair_count(self) -> int:
        return min(len(self.before_images), len(self.after_images))

    @property
    def available(self) -> bool:
        return self.pair_count > 0

    @property
    def has_next(self) -> bool:
        return self.available and self.index < self.pair_count - 1

    @property
    def has_previous(self) -> bool:
        return self.available and self.index > 0

    def go_to(self, index: int) -> int:
        """Jump to index, clamped to the valid range"""
        if not self.available:
            self.index = 0
        else:
            self.index = max(0, min(index, self.pair_count - 1))
        return self.index

    def next(self) -> int:
        if self.has_next:
            self.index += 1
        return self.index

    def previous(self) -> int:
        if self.has_previous:
            self.index -= 1
        return self.index

    def current(self) -> Optional[Tuple[Any, Any]]:
        if not self.available:
            return None
        return self.before_images[self.index], self.after_images[self.index]

    def pairs(self) -> List[Tuple[Any, Any]]:
        """All comparison pairs; extra images on the longer side are not paired"""
        return list(zip(self.before_images, self.after_images))
