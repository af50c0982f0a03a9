"""
Data models for breakpoint sets, srcset results and tag options.
"""

import math
from typing import Dict, Iterable, Optional, Tuple, TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from responsive_srcset.url import UrlBuilder


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class SrcsetResult(BaseModel):
    """Assembled srcset value plus the URL of the widest breakpoint."""
    srcset: str
    largest_url: str

    class Config:
        frozen = True


class BreakpointSet(BaseModel):
    """Ordered pixel widths used to build srcset candidates."""
    widths: Tuple[int, ...] = ()
    sizes: bool = False

    class Config:
        frozen = True

    @classmethod
    def from_widths(cls, widths: Iterable[int]) -> "BreakpointSet":
        """
        Build a set from explicit widths.

        Widths are sorted ascending. Duplicates and non-positive values are
        kept as given.
        """
        return cls(widths=tuple(sorted(widths)))

    @classmethod
    def from_range(
        cls,
        min_width: int,
        max_width: int,
        max_images: int
    ) -> "BreakpointSet":
        """
        Build a set of evenly spaced widths covering a range.

        Args:
            min_width: Width of the smallest image, in pixels.
            max_width: Width of the largest image, in pixels.
            max_images: Total count of generated breakpoints.

        Returns:
            BreakpointSet with exactly max_images widths (none when
            max_images is not positive).
        """
        if max_images <= 0:
            return cls()

        divisor = max_images - 1 if max_images > 1 else max_images
        step = _round_half_up((max_width - min_width) / divisor)
        widths = []
        current = min_width
        for _ in range(max_images):
            widths.append(current)
            current += step

        return cls(widths=tuple(widths))

    def with_sizes(self, sizes: bool = True) -> "BreakpointSet":
        """Return a copy that does (or does not) emit a sizes attribute."""
        return self.model_copy(update={"sizes": sizes})

    def has_sizes(self) -> bool:
        return self.sizes

    def is_empty(self) -> bool:
        return not self.widths

    def generate_srcset(
        self,
        source: str,
        url: "UrlBuilder"
    ) -> Optional[SrcsetResult]:
        """Generate srcset for `source`; None when there are no widths."""
        from responsive_srcset.srcset import generate_srcset
        return generate_srcset(self, source, url)

    def generate_sizes(self) -> str:
        from responsive_srcset.srcset import generate_sizes
        return generate_sizes(self)


class TagOptions(BaseModel):
    """Extra attributes and an optional breakpoint set for an image tag."""
    attributes: Dict[str, str] = Field(default_factory=dict)
    srcset: Optional[BreakpointSet] = None

    class Config:
        frozen = True

    def with_attributes(self, attributes: Dict[str, str]) -> "TagOptions":
        return self.model_copy(update={"attributes": dict(attributes)})

    def with_srcset(self, srcset: Optional[BreakpointSet]) -> "TagOptions":
        return self.model_copy(update={"srcset": srcset})
