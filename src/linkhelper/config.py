"""
Helper configuration - no external dependencies.

Tunables shared by every LinkHelper method.
"""

__all__ = ["HelperConfig"]

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass
class HelperConfig:
    """Configuration for link and image generation."""

    images_path: str = "/images/"
    default_image_extension: str = "png"
    only_path: bool = True
    confirm_template: str = "return confirm('{message}');"

    def confirm_script(self, message: Any) -> str:
        """Render the onclick script guarding a link with a confirm dialog."""
        return self.confirm_template.format(message=message)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HelperConfig":
        """
        Build a config from a plain mapping, ignoring unknown keys.

        Example:
            >>> HelperConfig.from_mapping({"images_path": "/img/", "colour": "red"})
            HelperConfig(images_path='/img/', default_image_extension='png', only_path=True, confirm_template="return confirm('{message}');")
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in mapping.items() if k in known})
