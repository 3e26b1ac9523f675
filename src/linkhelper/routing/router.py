"""
URL resolution from routing options.

``Router`` is the interface LinkHelper resolves URLs through; host
frameworks supply their own. ``SimpleRouter`` maps options onto
``/<controller>/<action>/<id>`` paths and is enough for standalone use.
"""

__all__ = [
    "Router",
    "SimpleRouter",
]

from typing import Any, Mapping, Optional, Protocol, Union

from loguru import logger

from linkhelper.errors import RoutingError
from linkhelper.routing.context import RequestContext
from linkhelper.routing.urls import build_query_string, join_path


class Router(Protocol):
    """Anything that turns routing options into a URL."""

    def resolve(self, options: Union[str, Mapping[str, Any]], *args: Any) -> str: ...


class SimpleRouter:
    """
    Minimal router for controller/action/id style URLs.

    Example:
        >>> router = SimpleRouter(host="example.com")
        >>> router.resolve({"controller": "posts", "action": "show", "id": 3})
        'http://example.com/posts/show/3'
        >>> router.resolve({"controller": "posts", "params": {"page": 2}, "only_path": True})
        '/posts?page=2'
    """

    def __init__(
        self,
        request: Optional[RequestContext] = None,
        host: Optional[str] = None,
        protocol: str = "http",
    ):
        """
        Initialize router.

        Args:
            request: Current request, supplies the default controller
            host: Host used for full URLs (when only_path is false)
            protocol: URL scheme for full URLs
        """
        self.request = request or RequestContext()
        self.host = host
        self.protocol = protocol

    def resolve(self, options: Union[str, Mapping[str, Any]], *args: Any) -> str:
        """
        Resolve routing options to a path or full URL.

        Strings are returned unchanged. Extra positional arguments are
        accepted for interface compatibility and ignored.

        Raises:
            RoutingError: No controller can be determined, an id is given
                without an action, or a full URL is requested without a host
        """
        if isinstance(options, str):
            return options

        controller = options.get("controller") or self.request.controller
        if not controller:
            raise RoutingError(f"No controller given and none in the current request: {dict(options)!r}")

        try:
            path = join_path(controller, options.get("action"), options.get("id"))
        except ValueError as e:
            raise RoutingError(f"An id needs an action: {dict(options)!r}") from e
        path += build_query_string(options.get("params") or {})
        if options.get("anchor"):
            path += f"#{options['anchor']}"

        if options.get("only_path", False):
            logger.trace(f"Resolved {dict(options)!r} to {path}")
            return path

        host = options.get("host") or self.host
        if not host:
            raise RoutingError("Cannot build a full URL without a host")
        protocol = options.get("protocol") or self.protocol
        url = f"{protocol}://{host}{path}"
        logger.trace(f"Resolved {dict(options)!r} to {url}")
        return url
