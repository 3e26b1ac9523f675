"""
Link helpers for views.

Links are built from the same routing options the controller layer uses
for redirects, so ``link_to`` always points where ``url_for`` does.
"""

__all__ = ["LinkHelper"]

from typing import Any, Callable, Mapping, Optional, Union

from loguru import logger

from linkhelper.config import HelperConfig
from linkhelper.helpers.images import extract_image_options
from linkhelper.html.tags import TagBuilder, html_escape
from linkhelper.routing.context import RequestContext
from linkhelper.routing.router import Router

LinkOptions = Union[str, Mapping[str, Any]]


class LinkHelper:
    """
    Build URLs, anchors and image links for the current request.

    Option mappings passed in are never modified.

    Example:
        >>> from linkhelper.routing import SimpleRouter
        >>> helper = LinkHelper(SimpleRouter())
        >>> helper.link_to("Home", "/")
        Markup('<a href="/">Home</a>')
    """

    def __init__(
        self,
        router: Router,
        request: Optional[RequestContext] = None,
        tag_builder: Optional[TagBuilder] = None,
        config: Optional[HelperConfig] = None,
    ):
        """
        Initialize helper.

        Args:
            router: Resolves routing options to URLs
            request: The request being rendered, for current-page checks
            tag_builder: Markup builder (defaults to TagBuilder())
            config: Helper configuration (defaults to HelperConfig())
        """
        self.router = router
        self.request = request or RequestContext()
        self.tag_builder = tag_builder or TagBuilder()
        self.config = config or HelperConfig()

    def url_for(self, options: Optional[LinkOptions] = None, *args: Any) -> str:
        """
        Return the URL for the given routing options.

        Mappings default to ``only_path`` unless the caller set it; strings
        go to the router as they are.
        """
        if options is None:
            options = {}
        if isinstance(options, Mapping):
            options = {"only_path": self.config.only_path, **options}
        url = self.router.resolve(options, *args)
        logger.debug(f"url_for({options!r}) -> {url}")
        return url

    def link_to(
        self,
        name: Any,
        options: Optional[LinkOptions] = None,
        html_options: Optional[Mapping[str, Any]] = None,
        *args: Any,
    ) -> str:
        """
        Create an anchor for ``name`` pointing at ``options``.

        ``options`` may be a URL string or routing options. A ``confirm``
        html option guards the link with a JavaScript confirm dialog.
        """
        html_options = self._convert_confirm_option_to_javascript(html_options)
        if isinstance(options, str):
            href = options
        else:
            href = self.url_for(options, *args)
        return self.tag_builder.content_tag("a", name, {**html_options, "href": href})

    def link_to_image(
        self,
        src: str,
        options: Optional[LinkOptions] = None,
        html_options: Optional[Mapping[str, Any]] = None,
        *args: Any,
    ) -> str:
        """
        Create a link wrapping an image.

        The ``alt``, ``size`` ("30x45") and ``align`` html options go on the
        image, everything else on the anchor. ``src`` may be a full path
        ("/my_images/image.gif"), a file name ("rss.gif" becomes
        "/images/rss.gif") or a name without extension ("logo" becomes
        "/images/logo.png").

        Raises:
            InvalidSizeError: If the size option is malformed
        """
        image_options, html_options = extract_image_options(src, html_options, self.config)
        image = self.tag_builder.tag("img", image_options)
        return self.link_to(image, options, html_options, *args)

    def link_to_unless_current(
        self,
        name: Any,
        options: Optional[Mapping[str, Any]] = None,
        html_options: Optional[Mapping[str, Any]] = None,
        *args: Any,
        block: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """
        Link to ``options`` unless that is the page being rendered.

        On the current page the escaped name is returned instead, or, when
        ``block`` is given, whatever ``block(name, options, html_options,
        *args)`` returns. Useful for navigation bars.
        """
        options = self._assume_current_url_options(options)
        if self._destination_equal_to_current(options):
            logger.debug(f"{options!r} is the current page, not linking")
            if block is not None:
                return block(name, options, html_options, *args)
            return html_escape(name)
        return self.link_to(name, options, html_options, *args)

    def current_page(self, options: Optional[Mapping[str, Any]] = None) -> bool:
        """Return True if ``options`` point at the page being rendered."""
        return self._destination_equal_to_current(self._assume_current_url_options(options))

    def mail_to(
        self,
        email_address: str,
        name: Any = None,
        html_options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Create a mailto link, labelled with the address unless ``name`` is given."""
        return self.tag_builder.content_tag(
            "a",
            email_address if name is None else name,
            {**(html_options or {}), "href": f"mailto:{email_address}"},
        )

    def _destination_equal_to_current(self, options: Mapping[str, Any]) -> bool:
        current = self.request
        return (
            options.get("action") == current.action
            and _same_id(options.get("id"), current.id)
            and options.get("controller") == current.controller
            and (
                current.params_without_location() == options["params"]
                if "params" in options
                else True
            )
        )

    def _assume_current_url_options(self, options: Optional[Mapping[str, Any]]) -> dict:
        options = dict(options or {})
        if options.get("controller") is None:
            options["controller"] = self.request.controller
            if options.get("action") is None:
                options["action"] = self.request.action
                if options.get("id") is None:
                    options["id"] = self.request.id
        return options

    def _convert_confirm_option_to_javascript(
        self, html_options: Optional[Mapping[str, Any]]
    ) -> dict:
        html_options = dict(html_options or {})
        if "confirm" in html_options:
            html_options["onclick"] = self.config.confirm_script(html_options.pop("confirm"))
        return html_options


def _same_id(a: Any, b: Any) -> bool:
    # request ids arrive as strings, link ids are often ints
    if a is None or b is None:
        return a is b
    return str(a) == str(b)
