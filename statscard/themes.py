"""
Color presets for the stats card.
"""
from typing import Dict, Optional


class Theme:
    """Theme configuration. Colors are hex values without the leading ``#``."""

    def __init__(
        self,
        id: str,
        title_color: str,
        text_color: str,
        icon_color: str,
        border_color: str,
        stroke_color: str,
        username_color: str,
        bg_color: str,
    ):
        self.id = id
        self.title_color = title_color
        self.text_color = text_color
        self.icon_color = icon_color
        self.border_color = border_color
        self.stroke_color = stroke_color
        self.username_color = username_color
        self.bg_color = bg_color

    def colors(self) -> Dict[str, str]:
        """Return the preset as UiConfig field values."""
        return {
            'title_color': self.title_color,
            'text_color': self.text_color,
            'icon_color': self.icon_color,
            'border_color': self.border_color,
            'stroke_color': self.stroke_color,
            'username_color': self.username_color,
            'bg_color': self.bg_color,
        }


# Theme registry
THEMES: Dict[str, Theme] = {
    'default': Theme(
        id='default',
        title_color='2f80ed',
        text_color='434d58',
        icon_color='4c71f2',
        border_color='e4e2e2',
        stroke_color='e4e2e2',
        username_color='2f80ed',
        bg_color='fffefe',
    ),
    'neon_dark': Theme(
        id='neon_dark',
        title_color='00d4ff',
        text_color='f3f4f6',
        icon_color='33dfff',
        border_color='374151',
        stroke_color='00d4ff',
        username_color='33dfff',
        bg_color='0a0e27',
    ),
    'solar_dark': Theme(
        id='solar_dark',
        title_color='fdb44b',
        text_color='f3f4f6',
        icon_color='fdc66b',
        border_color='374151',
        stroke_color='fdb44b',
        username_color='fdc66b',
        bg_color='30,111827,1f2937,111827',
    ),
    'light_clean': Theme(
        id='light_clean',
        title_color='3b82f6',
        text_color='111827',
        icon_color='60a5fa',
        border_color='e5e7eb',
        stroke_color='3b82f6',
        username_color='3b82f6',
        bg_color='ffffff',
    ),
    'minimal_dark': Theme(
        id='minimal_dark',
        title_color='8b5cf6',
        text_color='f3f4f6',
        icon_color='a78bfa',
        border_color='1f2937',
        stroke_color='8b5cf6',
        username_color='a78bfa',
        bg_color='030712',
    ),
}

DEFAULT_THEME = 'default'


def get_theme(theme_id: Optional[str]) -> Theme:
    """Get a theme by ID, returning default if not found."""
    return THEMES.get(theme_id, THEMES[DEFAULT_THEME])
