"""
HTML utilities subpackage.

Functions for escaping and tag generation.
"""

from linkhelper.html.tags import (
    TagBuilder,
    tag,
    content_tag,
    tag_options,
    html_escape,
    escape_attribute,
)

__all__ = [
    # tags
    "TagBuilder",
    "tag",
    "content_tag",
    "tag_options",
    "html_escape",
    "escape_attribute",
]
