"""
Views for the stats card app.
"""
import logging

from django.conf import settings
from django.http import HttpResponse
from django.utils.html import escape
from django.views.decorators.http import require_GET

from .card import render_card
from .config import from_query
from .services.github_client import GitHubClient

logger = logging.getLogger(__name__)

SVG_CONTENT_TYPE = 'image/svg+xml'


def error_svg(message: str) -> str:
    """Small SVG card carrying an error message."""
    return f'''<svg xmlns="http://www.w3.org/2000/svg" width="400" height="100">
            <defs>
                <linearGradient id="errorGrad" x1="0%" y1="0%" x2="100%" y2="100%">
                    <stop offset="0%" style="stop-color:#ff6b6b;stop-opacity:1" />
                    <stop offset="100%" style="stop-color:#ee5a6f;stop-opacity:1" />
                </linearGradient>
            </defs>
            <rect width="400" height="100" fill="url(#errorGrad)" rx="12"/>
            <text x="200" y="50" font-family="Inter, system-ui, sans-serif" font-size="14" fill="#fff" text-anchor="middle" font-weight="600">
                {escape(message[:60])}
            </text>
        </svg>'''


def _error_response(message: str, status: int) -> HttpResponse:
    response = HttpResponse(error_svg(message), content_type=SVG_CONTENT_TYPE, status=status)
    response['Cache-Control'] = 'no-store'
    return response


@require_GET
def card_view(request, username=None):
    """
    Render the stats card SVG for a GitHub user.
    The username comes from the path or the ``username`` query parameter;
    every other query parameter styles the card.
    """
    username = username or request.GET.get('username')
    if not username:
        return _error_response("Error: missing username", 400)

    ui_config = from_query(request.GET)
    try:
        data = GitHubClient().get_card_data(username)
    except ValueError as e:
        error_message = str(e)
        is_rate_limit = 'RATE_LIMIT' in error_message
        display_error = error_message.replace(' RATE_LIMIT_NO_TOKEN', '').replace(' RATE_LIMIT_WITH_TOKEN', '')
        return _error_response(f"Error: {display_error}", 429 if is_rate_limit else 404)

    try:
        svg = render_card(data, ui_config)
    except Exception:
        logger.exception("Failed to render card for %s", username)
        return _error_response("Error rendering stats card", 500)

    response = HttpResponse(svg, content_type=SVG_CONTENT_TYPE)
    cache_seconds = getattr(settings, 'CARD_CACHE_SECONDS', 3600)
    response['Cache-Control'] = f'public, max-age={cache_seconds}'
    return response
