"""Color theme for binclean CLI output.

binclean reads no configuration files, so the palette is fixed. It is
still validated through a pydantic model so a bad hex code fails at import
rather than at the first styled print.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Palette for the styles binclean prints with.

    All colors must be hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    path: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are hex codes."""
        if not isinstance(v, str) or not v.startswith("#"):
            msg = f"{info.field_name}: color must be a string starting with '#'"
            raise ValueError(msg)
        digits = v[1:]
        if len(digits) not in (3, 6) or any(c not in "0123456789abcdefABCDEF" for c in digits):
            msg = f"{info.field_name}: invalid hex color '{v}'"
            raise ValueError(msg)
        return v


def get_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the shared consoles.

    Args:
        colors: Palette to use. Defaults to the built-in palette.

    Returns:
        Rich Theme with one style per name used in binclean markup.
    """
    if colors is None:
        colors = ThemeColors()

    return Theme(
        {
            "muted": colors.muted,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "path": colors.path,
            "fatal": f"bold reverse {colors.error}",
        }
    )
