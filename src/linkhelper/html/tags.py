"""
HTML tag generation utilities.

Functions that generate HTML strings. Results are ``markupsafe.Markup`` so
they can be dropped into autoescaping templates unchanged.
"""

__all__ = [
    "TagBuilder",
    "tag",
    "content_tag",
    "tag_options",
    "html_escape",
    "escape_attribute",
]

import re
from html import escape as _escape
from typing import Any, Mapping, Optional

from markupsafe import Markup, escape

from linkhelper.errors import InvalidAttributeError

_ATTRIBUTE_NAME = re.compile(r"[^\s\"'<>/=\x00-\x1f\x7f]+")


def html_escape(text: Any) -> Markup:
    """
    Escape text for use as HTML content.

    Example:
        >>> html_escape("Fish & Chips")
        Markup('Fish &amp; Chips')
    """
    return escape(text)


def escape_attribute(value: Any) -> str:
    """
    Escape a value for use inside a double-quoted attribute.

    Single quotes are left alone so inline scripts stay readable.

    Example:
        >>> escape_attribute('say "hi" & go')
        'say &quot;hi&quot; &amp; go'
    """
    return _escape(str(value), quote=False).replace('"', "&quot;")


def tag_options(attributes: Optional[Mapping[str, Any]]) -> str:
    """
    Render attributes as ``key="value"`` pairs.

    Args:
        attributes: Attribute names to values, in output order.
                    None values are omitted.

    Returns:
        Attribute string with a leading space, or empty string

    Raises:
        InvalidAttributeError: If a key is not a valid attribute name

    Example:
        >>> tag_options({"href": "/", "class": None, "title": "Home"})
        ' href="/" title="Home"'
        >>> tag_options({})
        ''
    """
    if not attributes:
        return ""
    parts = []
    for key, value in attributes.items():
        if not _ATTRIBUTE_NAME.fullmatch(str(key)):
            raise InvalidAttributeError(key)
        if value is not None:
            parts.append(f'{key}="{escape_attribute(value)}"')
    if not parts:
        return ""
    return " " + " ".join(parts)


def tag(name: str, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """
    Generate a void HTML tag.

    Args:
        name: Tag name (e.g. "img")
        attributes: Tag attributes

    Returns:
        HTML tag string

    Example:
        >>> tag("img", {"src": "/images/logo.png", "alt": "Logo"})
        Markup('<img src="/images/logo.png" alt="Logo">')
    """
    return Markup("<{0}{1}>").format(name, Markup(tag_options(attributes)))


def content_tag(
    name: str,
    content: Any,
    attributes: Optional[Mapping[str, Any]] = None,
) -> Markup:
    """
    Generate an HTML tag wrapping content.

    Plain text content is escaped; ``Markup`` (such as an image from
    ``tag``) is nested as-is.

    Args:
        name: Tag name (e.g. "a")
        content: Inner content
        attributes: Tag attributes

    Returns:
        HTML tag string

    Example:
        >>> content_tag("a", "Fish & Chips", {"href": "/"})
        Markup('<a href="/">Fish &amp; Chips</a>')
    """
    return Markup("<{0}{1}>{2}</{0}>").format(
        name, Markup(tag_options(attributes)), content
    )


class TagBuilder:
    """
    Default tag builder used by LinkHelper.

    Any object with ``tag`` and ``content_tag`` methods of the same shape
    can stand in for it.
    """

    def tag(self, name: str, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
        return tag(name, attributes)

    def content_tag(
        self,
        name: str,
        content: Any,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Markup:
        return content_tag(name, content, attributes)
