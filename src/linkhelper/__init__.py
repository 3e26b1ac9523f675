"""
linkhelper - URL and link helpers for HTML views.

This package is organized into focused subpackages:

- html/         Tag generation (markupsafe)
                - tags: tag, content_tag, html_escape, TagBuilder

- routing/      Request context and URL resolution (no dependencies)
                - context: RequestContext
                - router: Router, SimpleRouter
                - urls: build_query_string, join_path

- helpers/      View helpers
                - url_helper: LinkHelper (url_for, link_to, link_to_image,
                  link_to_unless_current, current_page, mail_to)
                - images: image_source, image_alt, split_size

- integrations/ Template engine glue (requires jinja2)
                - jinja: install_helpers

Usage:
    from linkhelper import LinkHelper, RequestContext, SimpleRouter

    request = RequestContext.from_params({"controller": "pages", "action": "home"})
    helper = LinkHelper(SimpleRouter(request), request)
    helper.link_to_unless_current("Home", {"action": "home"})
"""

__version__ = "0.1.0"

from loguru import logger

from linkhelper.config import HelperConfig

from linkhelper.errors import (
    LinkHelperError,
    InvalidSizeError,
    RoutingError,
    InvalidAttributeError,
)

# Convenience imports from html
from linkhelper.html import (
    TagBuilder,
    tag,
    content_tag,
    html_escape,
)

# Convenience imports from routing (no dependencies)
from linkhelper.routing import (
    RequestContext,
    Router,
    SimpleRouter,
    build_query_string,
)

# Convenience imports from helpers
from linkhelper.helpers import (
    LinkHelper,
    image_source,
    image_alt,
    split_size,
)

logger.disable("linkhelper")

__all__ = [
    "__version__",
    # config
    "HelperConfig",
    # errors
    "LinkHelperError",
    "InvalidSizeError",
    "RoutingError",
    "InvalidAttributeError",
    # html.tags
    "TagBuilder",
    "tag",
    "content_tag",
    "html_escape",
    # routing
    "RequestContext",
    "Router",
    "SimpleRouter",
    "build_query_string",
    # helpers
    "LinkHelper",
    "image_source",
    "image_alt",
    "split_size",
]
