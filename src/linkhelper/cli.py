"""
Command line interface for linkhelper.

Renders links and URLs from the shell, mostly for trying options out:

    linkhelper link "Home" '{"controller": "pages", "action": "home"}'
    linkhelper --host=example.com url '{"controller": "posts", "only_path": false}'
    linkhelper --current='{"controller": "pages", "action": "home"}' unless_current Home
"""

from typing import Any, Mapping, Optional

import fire
from loguru import logger

from linkhelper.config import HelperConfig
from linkhelper.helpers.url_helper import LinkHelper
from linkhelper.log import configure_logging
from linkhelper.routing.context import RequestContext
from linkhelper.routing.router import SimpleRouter


class Commands:
    """Generate HTML links and URLs from routing options."""

    def __init__(
        self,
        host: Optional[str] = None,
        protocol: str = "http",
        current: Optional[Mapping[str, Any]] = None,
        images_path: str = "/images/",
        verbose: bool = False,
    ):
        """
        Args:
            host: Host for full URLs
            protocol: Scheme for full URLs
            current: Request params of the page being rendered
            images_path: Where bare image names live
            verbose: Log resolution details to stderr
        """
        if verbose:
            configure_logging("DEBUG", exclusive=True)
        request = RequestContext.from_params(current or {})
        self._helper = LinkHelper(
            SimpleRouter(request=request, host=host, protocol=protocol),
            request=request,
            config=HelperConfig(images_path=images_path),
        )

    def url(self, options: Any = None) -> str:
        """Print the URL for routing options (a mapping or a URL string)."""
        return self._helper.url_for(options)

    def link(self, name: str, options: Any = None, html_options: Optional[Mapping[str, Any]] = None) -> str:
        """Print an anchor tag."""
        return str(self._helper.link_to(name, options, html_options))

    def image(self, src: str, options: Any = None, html_options: Optional[Mapping[str, Any]] = None) -> str:
        """Print an image link."""
        return str(self._helper.link_to_image(src, options, html_options))

    def mail(self, address: str, name: Optional[str] = None, html_options: Optional[Mapping[str, Any]] = None) -> str:
        """Print a mailto link."""
        return str(self._helper.mail_to(address, name, html_options))

    def unless_current(
        self,
        name: str,
        options: Optional[Mapping[str, Any]] = None,
        html_options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Print a link, or just the name when the options are the current page."""
        return str(self._helper.link_to_unless_current(name, options, html_options))


def main() -> None:
    """Entry point for the ``linkhelper`` console script."""
    logger.debug("Starting linkhelper CLI")
    fire.Fire(Commands, name="linkhelper")


if __name__ == "__main__":
    main()
