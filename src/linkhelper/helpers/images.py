"""
Image attribute rules for image links.

Each rule is a small pure function; ``extract_image_options`` applies them
all and splits html options between the image and its enclosing anchor.
"""

__all__ = [
    "image_source",
    "image_alt",
    "split_size",
    "extract_image_options",
]

import posixpath
import re
from typing import Any, Mapping, Optional

from linkhelper.config import HelperConfig
from linkhelper.errors import InvalidSizeError

_SIZE_PATTERN = re.compile(r"(\d+)x(\d+)")


def image_source(src: str, config: Optional[HelperConfig] = None) -> str:
    """
    Expand an image name into its src attribute.

    Bare file names live under the images path; names without an
    extension get the default one.

    Example:
        >>> image_source("logo")
        '/images/logo.png'
        >>> image_source("rss.gif")
        '/images/rss.gif'
        >>> image_source("/my_images/image.gif")
        '/my_images/image.gif'
    """
    config = config or HelperConfig()
    if "/" not in src:
        src = config.images_path.rstrip("/") + "/" + src
    if not posixpath.splitext(src)[1]:
        src = f"{src}.{config.default_image_extension}"
    return src


def image_alt(src: str) -> str:
    """
    Derive alt text from an image path.

    Example:
        >>> image_alt("a/b/pic.jpg")
        'Pic'
        >>> image_alt("logo")
        'Logo'
    """
    filename = src.split("/")[-1]
    return filename.split(".")[0].capitalize()


def split_size(size: str) -> tuple[str, str]:
    """
    Split a ``"<width>x<height>"`` size into width and height.

    Raises:
        InvalidSizeError: If size is not two integers joined by "x"

    Example:
        >>> split_size("30x45")
        ('30', '45')
    """
    match = _SIZE_PATTERN.fullmatch(str(size).strip())
    if match is None:
        raise InvalidSizeError(size)
    return match.group(1), match.group(2)


def extract_image_options(
    src: str,
    html_options: Optional[Mapping[str, Any]] = None,
    config: Optional[HelperConfig] = None,
) -> tuple[dict, dict]:
    """
    Build image attributes and the html options left for the anchor.

    Args:
        src: Image path or name
        html_options: Options for the link; alt, size and align are
                      moved onto the image
        config: Helper configuration

    Returns:
        (image_attributes, remaining_html_options); the input is not modified

    Example:
        >>> extract_image_options("logo", {"size": "30x45", "class": "nav"})
        ({'src': '/images/logo.png', 'alt': 'Logo', 'width': '30', 'height': '45'}, {'class': 'nav'})
    """
    remaining = dict(html_options or {})
    image_options = {"src": image_source(src, config)}

    alt = remaining.pop("alt", None)
    image_options["alt"] = alt if alt is not None else image_alt(src)

    size = remaining.pop("size", None)
    if size is not None:
        image_options["width"], image_options["height"] = split_size(size)

    align = remaining.pop("align", None)
    if align is not None:
        image_options["align"] = align

    return image_options, remaining
