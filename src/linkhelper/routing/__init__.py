"""
Routing subpackage.

Request context, router interface and URL building utilities.
"""

from linkhelper.routing.context import (
    LOCATION_KEYS,
    RequestContext,
)

from linkhelper.routing.router import (
    Router,
    SimpleRouter,
)

from linkhelper.routing.urls import (
    build_query_string,
    join_path,
)

__all__ = [
    # context
    "LOCATION_KEYS",
    "RequestContext",
    # router
    "Router",
    "SimpleRouter",
    # urls
    "build_query_string",
    "join_path",
]
