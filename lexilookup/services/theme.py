"""
Icon selection for result records.

The theme is resolved once at startup and the chosen icon path is handed to
the formatter, so there is no shared mutable icon state.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST_WHITE = "high_contrast_white"
    HIGH_CONTRAST_BLACK = "high_contrast_black"
    HIGH_CONTRAST_ONE = "high_contrast_one"
    HIGH_CONTRAST_TWO = "high_contrast_two"


LIGHT_THEMES = {Theme.LIGHT, Theme.HIGH_CONTRAST_WHITE}


@dataclass(frozen=True)
class IconConfig:
    light: Optional[str] = None
    dark: Optional[str] = None


def get_icon_config() -> IconConfig:
    """Get icon paths from environment variables."""
    return IconConfig(
        light=os.getenv("DICTIONARY_ICON_LIGHT", "Images/dictionary.light.png"),
        dark=os.getenv("DICTIONARY_ICON_DARK", "Images/dictionary.dark.png"),
    )


def get_theme() -> Theme:
    """Get the current theme from the environment, defaulting to dark."""
    value = os.getenv("DICTIONARY_THEME", Theme.DARK.value).strip().lower()
    try:
        return Theme(value)
    except ValueError:
        return Theme.DARK


def resolve_icon_path(theme: Theme, icons: IconConfig) -> Optional[str]:
    """Light themes get the light icon, everything else the dark one."""
    return icons.light if theme in LIGHT_THEMES else icons.dark
