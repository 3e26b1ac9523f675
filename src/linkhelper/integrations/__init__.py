"""
Integrations subpackage (requires jinja2).
"""

from linkhelper.integrations.jinja import (
    HELPER_NAMES,
    install_helpers,
)

__all__ = [
    # jinja
    "HELPER_NAMES",
    "install_helpers",
]
