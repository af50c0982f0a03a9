"""
Srcset and sizes generation for breakpoint sets.
"""

import time
from typing import List, Optional

from responsive_srcset.models import BreakpointSet, SrcsetResult
from responsive_srcset.url import UrlBuilder
from responsive_srcset.utils.debug_logger import get_logger

SCALE_DIRECTIVE = "c_scale"
SIZES_FORMAT = "(max-width: {width}px) {width}px"


def breakpoint_transformation(base: str, width: int) -> str:
    """Raw transformation scaling the image to `width` on top of `base`."""
    return f"{base}{SCALE_DIRECTIVE},w_{width}"


def generate_srcset(
    breakpoints: Optional[BreakpointSet],
    source: str,
    url: UrlBuilder
) -> Optional[SrcsetResult]:
    """
    Render one URL per breakpoint and assemble the srcset value.

    The caller's builder is never modified. Every breakpoint is rendered
    from its own copy of the base builder, so scale transformations never
    accumulate across breakpoints.

    Args:
        breakpoints: Breakpoint set to render; None or empty yields None.
        source: Public identifier of the image.
        url: URL builder carrying any base transformation.

    Returns:
        SrcsetResult, or None when there are no breakpoints.
    """
    logger = get_logger()

    if breakpoints is None or breakpoints.is_empty():
        logger.log_no_result(source)
        return None

    start_time = time.time()
    base_url = url.duplicate()
    base = base_url.current_transformation_text()
    if base:
        base += "/"

    generation_id = logger.log_generation(source, breakpoints.widths, base)

    items: List[str] = []
    rendered = ""
    for width in breakpoints.widths:
        transformation = breakpoint_transformation(base, width)
        rendered = base_url.duplicate().with_transformation(transformation).render(source)
        logger.log_breakpoint(generation_id, source, width, transformation, rendered)
        items.append(f"{rendered} {width}w")

    # Widths are ascending, so the last URL is the largest
    result = SrcsetResult(srcset=", ".join(items), largest_url=rendered)

    logger.log_result(
        generation_id,
        source,
        result.srcset,
        result.largest_url,
        (time.time() - start_time) * 1000,
    )
    return result


def generate_sizes(breakpoints: BreakpointSet) -> str:
    """Media-query size hints, one per breakpoint, in ascending order."""
    return ", ".join(SIZES_FORMAT.format(width=width) for width in breakpoints.widths)
