"""
SVG rendering for the GitHub stats card.

Rendering runs in three steps: ``resolve_params`` turns the UI configuration
into locale strings, flags and coordinates, ``select_items`` builds the visible
metric rows, and ``assemble`` interpolates everything into the SVG document.
``render_card`` chains them. Nothing in this module performs I/O.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .icons import ICONS
from .translations import FALLBACK_LOCALE, LOCALES, LocaleEntry, get_locale
from .utils import parse_boolean

CARD_WIDTH = 535
MIN_CARD_HEIGHT = 220
BASE_OFFSET = 45
ROW_HEIGHT = 25

STATIC_FORMAT = 'png'
GRADIENT_ID = 'gradient'


@dataclass(frozen=True)
class Layout:
    """Pixel offsets for one animation/direction combination."""
    title_x: float
    title_y: float
    text_x: float
    data_x: float
    icon_x: float
    image_x: float
    image_y: float
    user_x: float
    user_y: float
    foll_x: float
    foll_y: float


# (animations disabled, right-to-left) -> offsets
LAYOUTS: Dict[Tuple[bool, bool], Layout] = {
    (False, False): Layout(
        title_x=5, title_y=-10, text_x=25, data_x=225, icon_x=0,
        image_x=125, image_y=65, user_x=109.9, user_y=130, foll_x=110, foll_y=151,
    ),
    (False, True): Layout(
        title_x=510, title_y=-10, text_x=215, data_x=15, icon_x=225,
        image_x=125, image_y=65, user_x=109.9, user_y=130, foll_x=110, foll_y=151,
    ),
    (True, False): Layout(
        title_x=15, title_y=0, text_x=25, data_x=225, icon_x=0,
        image_x=120, image_y=70, user_x=119.9, user_y=140, foll_x=120, foll_y=161,
    ),
    (True, True): Layout(
        title_x=520, title_y=0, text_x=215, data_x=15, icon_x=225,
        image_x=120, image_y=70, user_x=119.9, user_y=140, foll_x=120, foll_y=161,
    ),
}


@dataclass(frozen=True)
class ResolvedParams:
    """Everything the assembler needs that depends only on configuration."""
    locale: LocaleEntry
    fallback: LocaleEntry
    direction: str
    animations_disabled: bool
    layout: Layout
    stroke_attrs: str
    border_attrs: str
    title_color: str
    text_color: str
    username_color: str
    icon_color: str

    def text(self, key: str) -> str:
        return self.locale.text(key, self.fallback)


@dataclass(frozen=True)
class MetricItem:
    key: str
    text: str
    value: Any
    icon: str
    hidden: bool


@dataclass(frozen=True)
class SolidBackground:
    color: str


@dataclass(frozen=True)
class GradientBackground:
    angle: str
    colors: Tuple[str, ...]

    def stops(self) -> List[Tuple[Union[int, float], str]]:
        """Color stops spread evenly from 0% to 100%."""
        count = len(self.colors)
        if count == 0:
            return []
        if count == 1:
            return [(0, self.colors[0])]
        return [
            (_format_number(index * 100 / (count - 1)), color)
            for index, color in enumerate(self.colors)
        ]


Background = Union[SolidBackground, GradientBackground]

# (selection key, locale key, data attribute, icon key, opt-in)
CATALOG: Tuple[Tuple[str, str, str, str, bool], ...] = (
    ('repos', 'total_repos_text', 'public_repos', 'repository', False),
    ('stars', 'stars_count_text', 'total_stars', 'star', False),
    ('forks', 'forks_count_text', 'total_forks', 'fork', False),
    ('commits', 'commits_count_text', 'total_commits', 'commit', False),
    ('prs', 'total_pr_text', 'total_prs', 'pull_request', False),
    ('prs_merged', 'total_pr_merged_text', 'total_prs_merged', 'pull_request_merged', False),
    ('reviews', 'total_pr_reviewed_text', 'total_review', 'review', True),
    ('issues', 'total_issues_text', 'total_issues', 'issue', False),
    ('issues_closed', 'total_issues_closed_text', 'total_closed_issues', 'issue_closed', True),
    ('discussions_started', 'total_discussion_started_text', 'total_discussion_started', 'discussion_started', True),
    ('discussions_answered', 'total_discussion_answered_text', 'total_discussion_answered', 'discussion_answered', True),
    ('contributed', 'contributed_to_text', 'total_contributed_to', 'contributed_to', False),
)


def _format_number(value: float) -> Union[int, float]:
    """Drop the decimal point from integral floats (``100.0`` -> ``100``)."""
    return int(value) if float(value).is_integer() else value


def card_height(visible_count: int) -> int:
    return max(MIN_CARD_HEIGHT, BASE_OFFSET + visible_count * ROW_HEIGHT)


def resolve_params(ui_config, locales: Optional[Dict[str, LocaleEntry]] = None) -> ResolvedParams:
    """
    Resolve locale, flags, coordinates and stroke/border attributes.

    Never fails: an unknown locale falls back to ``FALLBACK_LOCALE`` and
    unparseable flags read as false.
    """
    if locales is None:
        locales = LOCALES
    fallback = locales[FALLBACK_LOCALE]
    locale = get_locale(ui_config.locale, locales)

    rtl = parse_boolean(locale.rtl_direction)
    animations_disabled = (
        parse_boolean(ui_config.disabled_animations) or ui_config.format == STATIC_FORMAT
    )

    if parse_boolean(ui_config.hide_stroke):
        stroke_attrs = ''
    else:
        stroke_attrs = f'stroke="#{ui_config.stroke_color}" stroke-width="5"'

    if parse_boolean(ui_config.hide_border):
        border_attrs = ''
    else:
        border_attrs = (
            f'stroke="#{ui_config.border_color}" stroke-opacity="1" '
            f'stroke-width="{ui_config.border_width}"'
        )

    return ResolvedParams(
        locale=locale,
        fallback=fallback,
        direction='rtl' if rtl else 'ltr',
        animations_disabled=animations_disabled,
        layout=LAYOUTS[(animations_disabled, rtl)],
        stroke_attrs=stroke_attrs,
        border_attrs=border_attrs,
        title_color=ui_config.title_color,
        text_color=ui_config.text_color,
        username_color=ui_config.username_color,
        icon_color=ui_config.icon_color,
    )


def select_items(
    data,
    locale: LocaleEntry,
    hidden_items: Optional[str],
    show_items: Optional[str],
    icons: Optional[Dict[str, str]] = None,
    fallback: Optional[LocaleEntry] = None,
) -> List[MetricItem]:
    """
    Build the visible metric rows in catalog order.

    Core metrics are hidden only when listed in ``hidden_items``; opt-in
    metrics are shown only when listed in ``show_items``. Both lists are
    comma-separated and matched exactly, without trimming.
    """
    if icons is None:
        icons = ICONS
    if fallback is None:
        fallback = LOCALES[FALLBACK_LOCALE]
    hidden = (hidden_items or '').split(',')
    shown = (show_items or '').split(',')

    items = []
    for key, text_key, attr, icon_key, opt_in in CATALOG:
        items.append(MetricItem(
            key=key,
            text=locale.text(text_key, fallback),
            value=getattr(data, attr),
            icon=icons[icon_key],
            hidden=key not in shown if opt_in else key in hidden,
        ))
    return [item for item in items if not item.hidden]


def normalize_background(bg_color: Union[None, str, Sequence[str]]) -> Optional[Background]:
    """
    Turn the loosely typed ``bg_color`` into a solid or gradient background.

    A list, or a string holding two or more comma-separated tokens, is a
    gradient: the first token is the rotation angle and the rest are colors.
    A list holding only an angle yields a gradient with no stops.
    """
    if not bg_color:
        return None
    if isinstance(bg_color, (list, tuple)):
        return _gradient(list(bg_color))
    tokens = bg_color.split(',')
    if len(tokens) >= 2:
        return _gradient([token.strip() for token in tokens])
    return SolidBackground(color=bg_color)


def _gradient(tokens: List[str]) -> GradientBackground:
    return GradientBackground(angle=tokens[0], colors=tuple(tokens[1:]))


def render_background(background: Optional[Background], border_radius, border_attrs: str) -> str:
    if background is None:
        return ''
    if isinstance(background, SolidBackground):
        return (
            f'<rect x="0.5" y="0.5" rx="{border_radius}" height="99.6%" width="99.8%" '
            f'fill="#{background.color}" {border_attrs}/>'
        )
    stops = ''.join(
        f'<stop offset="{offset}%" stop-color="#{color}"/>'
        for offset, color in background.stops()
    )
    return f'''
    <defs>
        <linearGradient id="{GRADIENT_ID}" gradientTransform="rotate({background.angle})" gradientUnits="userSpaceOnUse">
            {stops}
        </linearGradient>
    </defs>
    <rect x="0.5" y="0.5" rx="{border_radius}" height="99.6%" width="99.8%" fill="url(#{GRADIENT_ID})" {border_attrs}/>
    '''


def _animations_css(layout: Layout) -> str:
    return f'''        /* Animations */
        @keyframes scaleInAnimation {{
            from {{
                transform: translate(-5px, 5px) scale(0);
            }}
            to {{
                transform: translate(-5px, 5px) scale(1);
            }}
        }}
        @keyframes fadeInAnimation {{
            from {{
                opacity: 0;
            }}
            to {{
                opacity: 1;
            }}
        }}
        @keyframes fadeLeftInAnimation {{
            from {{
                opacity: 0;
                transform: translate(-90px, 10px);
            }}
            to {{
                opacity: 1;
                transform: translate(10px, 10px);
            }}
        }}

        .div-animation {{
            animation: fadeLeftInAnimation 0.7s ease-in-out forwards;
        }}

        .image-profile-animation {{
            animation: scaleInAnimation 1.2s ease-in-out forwards;
            transform-origin: {layout.image_x}px {layout.image_y}px;
        }}

        .single-item-animation {{
            opacity: 0;
            animation: fadeInAnimation 0.3s ease-in-out forwards;
        }}'''


def _render_item(item: MetricItem, index: int, params: ResolvedParams) -> str:
    layout = params.layout
    delay = '' if params.animations_disabled else f' style="animation-delay: {210 + index * 100}ms"'
    return f'''
            <g transform="translate(230, {index * ROW_HEIGHT})">
                <g class="single-item-animation"{delay} transform="translate(25, 0)">
                    <svg x="{layout.icon_x}" y="0" class="icon" viewBox="0 0 16 16" version="1.1" width="16" height="16">
                        {item.icon}
                    </svg>
                    <text class="text" x="{layout.text_x}" y="12.5">{item.text}:</text>
                    <text class="text text-bold" x="{layout.data_x}" y="12.5">{item.value}</text>
                </g>
            </g>'''


def assemble(data, params: ResolvedParams, items: List[MetricItem], background_svg: Optional[str]) -> str:
    """Interpolate resolved parameters, data and rows into the final SVG."""
    layout = params.layout
    height = card_height(len(items))
    title = params.text('title_card').replace('{name}', str(data.name))
    animations = '' if params.animations_disabled else _animations_css(layout)
    rows = '\n'.join(_render_item(item, index, params) for index, item in enumerate(items))

    return f'''<svg width="{CARD_WIDTH}" height="{height}" direction="{params.direction}" viewBox="0 0 {CARD_WIDTH} {height}" fill="none" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
    <style>
{animations}

        .text {{
            font-family: "Segoe UI", Ubuntu, sans-serif;
            fill: #{params.text_color};
            font-size: 14px;
        }}

        .text-bold {{
            font-weight: 700;
        }}

        .text-middle {{
            alignment-baseline: middle;
            text-anchor: middle;
        }}

        .text-followers {{
            font-family: "Segoe UI", Ubuntu, sans-serif;
            fill: #{params.text_color};
            font-size: 13px;
        }}

        .text-username {{
            font-family: "Segoe UI", Ubuntu, sans-serif;
            fill: #{params.username_color};
            font-weight: 750;
            font-size: 14.6px;
            alignment-baseline: middle;
            text-anchor: middle;
        }}

        .text-title {{
            font-family: "Segoe UI", Ubuntu, sans-serif;
            fill: #{params.title_color};
            font-size: 17px;
            font-weight: 600;
        }}

        .icon {{
            fill: #{params.icon_color};
            display: block;
        }}
    </style>
    <title id="titleId">{title}</title>

    {background_svg or ''}
    <g transform="translate(0, 25)">
        <g class="div-animation">
            <text x="{layout.title_x}" y="{layout.title_y}" class="text-title">{title}</text>
        </g>
        <g class="image-profile-animation">
            <defs>
                <pattern id="image" x="0%" y="0%" height="100%" width="100%" viewBox="0 0 512 512">
                    <image x="0%" y="0%" width="512" height="512" href="data:image/jpeg;base64,{data.pic}"></image>
                </pattern>
            </defs>
            <circle cx="{layout.image_x}" cy="{layout.image_y}" r="50" fill="url(#image)" {params.stroke_attrs}/>
        </g>
        <text x="{layout.user_x}" y="{layout.user_y}" direction="ltr" class="text-username div-animation">@{data.username}</text>
        <g class="div-animation text-middle">
            <text x="{layout.foll_x}" y="{layout.foll_y}" class="text-followers"><tspan class="text-bold">{data.followers}</tspan> {params.text('followers_text')} · <tspan class="text-bold">{data.following}</tspan> {params.text('following_text')}</text>
        </g>

        <svg x="-10" y="12">
            {rows}
        </svg>
    </g>
</svg>'''


def render_card(
    data,
    ui_config,
    locales: Optional[Dict[str, LocaleEntry]] = None,
    icons: Optional[Dict[str, str]] = None,
) -> str:
    """Render the stats card SVG for ``data`` styled by ``ui_config``."""
    params = resolve_params(ui_config, locales)
    items = select_items(
        data,
        params.locale,
        ui_config.hidden_items,
        ui_config.show_items,
        icons=icons,
        fallback=params.fallback,
    )
    background = render_background(
        normalize_background(ui_config.bg_color),
        ui_config.border_radius,
        params.border_attrs,
    )
    return assemble(data, params, items, background)
