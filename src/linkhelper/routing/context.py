"""
Current request context.

The controller, action, id and extra parameters of the page being
rendered, passed explicitly to helpers and routers.
"""

__all__ = [
    "LOCATION_KEYS",
    "RequestContext",
]

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

LOCATION_KEYS = ("controller", "action", "id")


@dataclass(frozen=True)
class RequestContext:
    """Read-only view of the in-flight request's routing parameters."""

    controller: Optional[str] = None
    action: Optional[str] = None
    id: Any = None
    params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "RequestContext":
        """
        Split a flat request-parameter mapping into location and extras.

        Example:
            >>> ctx = RequestContext.from_params({"controller": "posts", "action": "show", "id": "3", "page": "2"})
            >>> ctx.controller, ctx.id, dict(ctx.params)
            ('posts', '3', {'page': '2'})
        """
        return cls(
            controller=params.get("controller"),
            action=params.get("action"),
            id=params.get("id"),
            params={k: v for k, v in params.items() if k not in LOCATION_KEYS},
        )

    def params_without_location(self) -> dict:
        """Return the request params with controller, action and id removed."""
        return {k: v for k, v in self.params.items() if k not in LOCATION_KEYS}
