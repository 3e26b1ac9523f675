"""Exceptions raised by linkhelper."""

__all__ = [
    "LinkHelperError",
    "InvalidSizeError",
    "RoutingError",
    "InvalidAttributeError",
]


class LinkHelperError(Exception):
    """Base class for linkhelper errors."""


class InvalidSizeError(LinkHelperError, ValueError):
    """An image ``size`` option that is not ``<width>x<height>``."""

    def __init__(self, size: str):
        self.size = size
        super().__init__(f"Invalid image size {size!r}, expected '<width>x<height>'")


class RoutingError(LinkHelperError):
    """Routing options that cannot be turned into a URL."""


class InvalidAttributeError(LinkHelperError, ValueError):
    """An html option whose key cannot be used as an attribute name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid attribute name {name!r}")
