"""
UI configuration for the stats card and its parsing from query parameters.
"""
from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Union

from .themes import DEFAULT_THEME, get_theme
from .translations import FALLBACK_LOCALE

_DEFAULT_COLORS = get_theme(DEFAULT_THEME)


@dataclass(frozen=True)
class UiConfig:
    """
    Rendering options for one card.

    Flag fields (``hide_border``, ``hide_stroke``, ``disabled_animations``)
    keep whatever loosely typed value they were given and are read through
    ``parse_boolean``. ``bg_color`` is a single color, a comma-separated
    gradient string or a list of gradient tokens.
    """
    locale: str = FALLBACK_LOCALE
    title_color: str = _DEFAULT_COLORS.title_color
    text_color: str = _DEFAULT_COLORS.text_color
    icon_color: str = _DEFAULT_COLORS.icon_color
    border_color: str = _DEFAULT_COLORS.border_color
    stroke_color: str = _DEFAULT_COLORS.stroke_color
    username_color: str = _DEFAULT_COLORS.username_color
    bg_color: Union[str, List[str], None] = _DEFAULT_COLORS.bg_color
    hide_border: Any = False
    hide_stroke: Any = False
    border_radius: str = '4.5'
    border_width: str = '1'
    disabled_animations: Any = False
    format: str = 'svg'
    hidden_items: str = ''
    show_items: str = ''


# query parameter -> UiConfig field
QUERY_FIELDS = {
    'locale': 'locale',
    'titleColor': 'title_color',
    'textColor': 'text_color',
    'iconColor': 'icon_color',
    'borderColor': 'border_color',
    'strokeColor': 'stroke_color',
    'usernameColor': 'username_color',
    'hideBorder': 'hide_border',
    'hideStroke': 'hide_stroke',
    'borderRadius': 'border_radius',
    'borderWidth': 'border_width',
    'disabledAnimations': 'disabled_animations',
    'format': 'format',
    'hiddenItems': 'hidden_items',
    'showItems': 'show_items',
}


def _get_list(params: Mapping, key: str) -> List[str]:
    if hasattr(params, 'getlist'):
        return params.getlist(key)
    value = params.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def from_query(params: Mapping) -> UiConfig:
    """
    Build a UiConfig from request query parameters.

    ``theme`` picks a color preset; explicit color parameters override it.
    A repeated ``bgColor`` parameter becomes a gradient token list. Empty
    values count as missing.
    """
    config = UiConfig()
    if params.get('theme'):
        config = replace(config, **get_theme(params.get('theme')).colors())

    overrides = {}
    for param, field in QUERY_FIELDS.items():
        value = params.get(param)
        if isinstance(value, (list, tuple)):
            value = value[-1] if value else None
        if value:
            overrides[field] = value

    bg_values = [value for value in _get_list(params, 'bgColor') if value]
    if len(bg_values) > 1:
        overrides['bg_color'] = bg_values
    elif bg_values:
        overrides['bg_color'] = bg_values[0]

    return replace(config, **overrides)
