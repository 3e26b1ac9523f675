"""
View helpers subpackage.

LinkHelper and the image attribute rules it uses.
"""

from linkhelper.helpers.images import (
    image_source,
    image_alt,
    split_size,
    extract_image_options,
)

from linkhelper.helpers.url_helper import (
    LinkHelper,
)

__all__ = [
    # images
    "image_source",
    "image_alt",
    "split_size",
    "extract_image_options",
    # url_helper
    "LinkHelper",
]
