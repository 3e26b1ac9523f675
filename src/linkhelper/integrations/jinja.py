"""Expose LinkHelper methods to Jinja2 templates."""

__all__ = ["HELPER_NAMES", "install_helpers"]

import jinja2

from linkhelper.helpers.url_helper import LinkHelper

HELPER_NAMES = (
    "url_for",
    "link_to",
    "link_to_image",
    "link_to_unless_current",
    "current_page",
    "mail_to",
)


def install_helpers(env: jinja2.Environment, helper: LinkHelper) -> jinja2.Environment:
    """
    Register the helper's methods as template globals.

    Helpers return ``Markup``, so autoescaping environments render their
    tags unescaped.

    Example:
        >>> env = jinja2.Environment(autoescape=True)
        >>> install_helpers(env, helper)  # doctest: +SKIP
        >>> env.from_string("{{ link_to('Home', '/') }}").render()  # doctest: +SKIP
        '<a href="/">Home</a>'
    """
    env.globals.update({name: getattr(helper, name) for name in HELPER_NAMES})
    return env
