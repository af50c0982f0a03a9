"""
Image tag attribute assembly from tag options.
"""

from typing import Dict, Optional

from responsive_srcset.models import TagOptions
from responsive_srcset.srcset import generate_srcset
from responsive_srcset.url import UrlBuilder


def image_attributes(
    source: str,
    url: UrlBuilder,
    options: Optional[TagOptions] = None
) -> Dict[str, str]:
    """
    Build the attribute map for an image tag.

    Args:
        source: Public identifier of the image.
        url: URL builder used for the source and every srcset candidate.
        options: Extra attributes and an optional breakpoint set.

    Returns:
        Attributes with `src` always set, plus `srcset` and `sizes` when
        the breakpoint set produces them. Computed values replace caller
        supplied ones with the same name.
    """
    options = options or TagOptions()
    attributes = dict(options.attributes)

    breakpoints = options.srcset
    result = generate_srcset(breakpoints, source, url) if breakpoints is not None else None

    if result is None:
        attributes.pop("srcset", None)
        attributes.pop("sizes", None)
        attributes["src"] = url.render(source)
        return attributes

    attributes["src"] = result.largest_url
    attributes["srcset"] = result.srcset
    if breakpoints.has_sizes():
        attributes["sizes"] = breakpoints.generate_sizes()
    else:
        attributes.pop("sizes", None)

    return attributes
