"""
Tests for the stats card app.
"""
from dataclasses import replace
from unittest.mock import patch, MagicMock

import requests
from django.core.cache import cache
from django.http import QueryDict
from django.test import SimpleTestCase, override_settings

from .card import (
    CATALOG,
    GradientBackground,
    SolidBackground,
    card_height,
    normalize_background,
    render_background,
    render_card,
    resolve_params,
    select_items,
)
from .config import UiConfig, from_query
from .icons import ICONS
from .services.github_client import CardData, GitHubClient
from .themes import DEFAULT_THEME, THEMES, get_theme
from .translations import FALLBACK_LOCALE, LOCALES, LocaleEntry, get_locale
from .utils import parse_boolean

OPT_OUT_KEYS = ['repos', 'stars', 'forks', 'commits', 'prs', 'prs_merged', 'issues', 'contributed']
OPT_IN_KEYS = ['reviews', 'issues_closed', 'discussions_started', 'discussions_answered']


def make_data(**overrides) -> CardData:
    values = dict(
        name='Ada',
        username='ada',
        pic='aW1n',
        public_repos=3,
        total_stars=0,
        total_forks=0,
        total_commits=0,
        total_prs=0,
        total_prs_merged=0,
        total_review=0,
        total_issues=0,
        total_closed_issues=0,
        total_discussion_started=0,
        total_discussion_answered=0,
        total_contributed_to=0,
        followers=10,
        following=5,
    )
    values.update(overrides)
    return CardData(**values)


def visible_keys(hidden_items='', show_items=''):
    items = select_items(make_data(), LOCALES['en'], hidden_items, show_items)
    return [item.key for item in items]


class ParseBooleanTests(SimpleTestCase):
    """Tests for the shared flag predicate."""

    def test_booleans_pass_through(self):
        self.assertTrue(parse_boolean(True))
        self.assertFalse(parse_boolean(False))

    def test_affirmative_strings(self):
        for value in ['true', 'TRUE', 'True', '1', 't', 'yes', 'Y', 'on', ' true ']:
            with self.subTest(value=value):
                self.assertTrue(parse_boolean(value))

    def test_everything_else_is_false(self):
        for value in ['false', '0', '', 'no', 'off', 'maybe', None, 1, 0, [], 'truthy']:
            with self.subTest(value=value):
                self.assertFalse(parse_boolean(value))


class LocaleTests(SimpleTestCase):
    """Tests for the locale table."""

    def test_fallback_locale_is_complete(self):
        fallback = LOCALES[FALLBACK_LOCALE]
        for key in LocaleEntry.TEXT_KEYS:
            with self.subTest(key=key):
                self.assertTrue(getattr(fallback, key))

    def test_get_locale_unknown(self):
        """Unknown locale codes resolve to the fallback locale."""
        self.assertIs(get_locale('xx'), LOCALES[FALLBACK_LOCALE])

    def test_get_locale_injected_table(self):
        table = {'en': LocaleEntry(code='en', title_card='T'), 'zz': LocaleEntry(code='zz')}
        self.assertEqual(get_locale('zz', table).code, 'zz')
        self.assertEqual(get_locale('nope', table).code, 'en')

    def test_per_key_fallback(self):
        """A locale missing one key still uses its own value for the others."""
        italian = LOCALES['it']
        fallback = LOCALES[FALLBACK_LOCALE]
        self.assertEqual(italian.text('total_pr_merged_text', fallback), 'Total PRs Merged')
        self.assertEqual(italian.text('total_repos_text', fallback), 'Repository totali')


class ResolveParamsTests(SimpleTestCase):
    """Tests for the parameter resolver."""

    def test_defaults(self):
        params = resolve_params(UiConfig())
        self.assertEqual(params.direction, 'ltr')
        self.assertFalse(params.animations_disabled)
        self.assertEqual(params.layout.title_x, 5)
        self.assertEqual(params.layout.title_y, -10)
        self.assertEqual(params.layout.image_x, 125)
        self.assertEqual(params.layout.user_x, 109.9)
        self.assertEqual(params.layout.foll_y, 151)

    def test_disabled_animations_string(self):
        params = resolve_params(UiConfig(disabled_animations='true'))
        self.assertTrue(params.animations_disabled)
        self.assertEqual(params.layout.title_x, 15)
        self.assertEqual(params.layout.title_y, 0)
        self.assertEqual(params.layout.image_y, 70)
        self.assertEqual(params.layout.user_y, 140)
        self.assertEqual(params.layout.foll_x, 120)

    def test_png_format_disables_animations(self):
        params = resolve_params(UiConfig(format='png', disabled_animations='false'))
        self.assertTrue(params.animations_disabled)

    def test_rtl_locale(self):
        params = resolve_params(UiConfig(locale='ar'))
        self.assertEqual(params.direction, 'rtl')
        self.assertEqual(params.layout.title_x, 510)
        self.assertEqual(params.layout.text_x, 215)
        self.assertEqual(params.layout.data_x, 15)
        self.assertEqual(params.layout.icon_x, 225)

    def test_rtl_string_flag_and_static(self):
        params = resolve_params(UiConfig(locale='he', disabled_animations=True))
        self.assertEqual(params.direction, 'rtl')
        self.assertEqual(params.layout.title_x, 520)

    def test_unknown_locale_falls_back(self):
        params = resolve_params(UiConfig(locale='xx'))
        self.assertEqual(params.locale.code, 'en')

    def test_stroke_and_border_attributes(self):
        params = resolve_params(UiConfig(stroke_color='abcdef', border_color='123456', border_width='2'))
        self.assertEqual(params.stroke_attrs, 'stroke="#abcdef" stroke-width="5"')
        self.assertEqual(params.border_attrs, 'stroke="#123456" stroke-opacity="1" stroke-width="2"')

    def test_hidden_stroke_and_border(self):
        params = resolve_params(UiConfig(hide_stroke='TRUE', hide_border=True))
        self.assertEqual(params.stroke_attrs, '')
        self.assertEqual(params.border_attrs, '')


class SelectItemsTests(SimpleTestCase):
    """Tests for metric row selection."""

    def test_default_rows(self):
        self.assertEqual(visible_keys(), OPT_OUT_KEYS)

    def test_catalog_order_with_everything_shown(self):
        keys = visible_keys(show_items=','.join(OPT_IN_KEYS))
        self.assertEqual(keys, [entry[0] for entry in CATALOG])

    def test_hiding_opt_out_item_removes_only_it(self):
        for key in OPT_OUT_KEYS:
            with self.subTest(key=key):
                expected = [k for k in OPT_OUT_KEYS if k != key]
                self.assertEqual(visible_keys(hidden_items=key), expected)

    def test_showing_opt_in_item_adds_only_it(self):
        for key in OPT_IN_KEYS:
            with self.subTest(key=key):
                keys = visible_keys(show_items=key)
                self.assertEqual(sorted(keys), sorted(OPT_OUT_KEYS + [key]))

    def test_opt_in_items_ignore_hidden_list(self):
        self.assertEqual(visible_keys(hidden_items='reviews'), OPT_OUT_KEYS)

    def test_opt_out_items_ignore_show_list(self):
        self.assertEqual(visible_keys(show_items='stars'), OPT_OUT_KEYS)

    def test_selection_is_not_trimmed(self):
        self.assertIn('repos', visible_keys(hidden_items=' repos'))
        self.assertNotIn('repos', visible_keys(hidden_items='stars,repos'))

    def test_item_fields(self):
        items = select_items(make_data(total_stars=42), LOCALES['en'], None, None)
        stars = items[1]
        self.assertEqual(stars.text, 'Total Stars Earned')
        self.assertEqual(stars.value, 42)
        self.assertEqual(stars.icon, ICONS['star'])
        self.assertFalse(stars.hidden)

    def test_injected_icons(self):
        icons = {key: f'<i>{key}</i>' for key in ICONS}
        items = select_items(make_data(), LOCALES['en'], '', '', icons=icons)
        self.assertEqual(items[0].icon, '<i>repository</i>')


class BackgroundTests(SimpleTestCase):
    """Tests for background normalization and rendering."""

    def test_missing_background(self):
        self.assertIsNone(normalize_background(None))
        self.assertIsNone(normalize_background(''))
        self.assertEqual(render_background(None, '4.5', ''), '')

    def test_single_token_is_solid(self):
        self.assertEqual(normalize_background('112233'), SolidBackground(color='112233'))

    def test_list_is_gradient(self):
        background = normalize_background(['45', 'ff0000', '00ff00'])
        self.assertEqual(background, GradientBackground(angle='45', colors=('ff0000', '00ff00')))

    def test_comma_string_is_trimmed_gradient(self):
        background = normalize_background('30, aaaaaa ,bbbbbb')
        self.assertEqual(background, GradientBackground(angle='30', colors=('aaaaaa', 'bbbbbb')))

    def test_two_stop_offsets(self):
        stops = GradientBackground(angle='45', colors=('ff0000', '00ff00')).stops()
        self.assertEqual(stops, [(0, 'ff0000'), (100, '00ff00')])

    def test_offsets_are_evenly_spread(self):
        colors = ('a', 'b', 'c', 'd')
        offsets = [offset for offset, _ in GradientBackground(angle='0', colors=colors).stops()]
        self.assertEqual(offsets, [0, 100 / 3, 200 / 3, 100])

    def test_single_stop_does_not_divide_by_zero(self):
        stops = normalize_background(['45', 'ff0000']).stops()
        self.assertEqual(stops, [(0, 'ff0000')])

    def test_angle_only_list_has_no_stops(self):
        background = normalize_background(['45'])
        self.assertEqual(background, GradientBackground(angle='45', colors=()))
        self.assertEqual(background.stops(), [])

    def test_angle_only_list_still_renders(self):
        svg = render_card(make_data(), UiConfig(bg_color=['45']))
        self.assertIn('gradientTransform="rotate(45)"', svg)
        self.assertNotIn('<stop ', svg)
        self.assertIn('fill="url(#gradient)"', svg)

    def test_solid_fragment(self):
        svg = render_background(SolidBackground('112233'), '4.5', 'stroke="#000"')
        self.assertIn('fill="#112233"', svg)
        self.assertIn('rx="4.5"', svg)
        self.assertIn('stroke="#000"', svg)
        self.assertNotIn('linearGradient', svg)

    def test_gradient_fragment(self):
        svg = render_background(normalize_background(['45', 'ff0000', '00ff00']), '4.5', '')
        self.assertIn('gradientTransform="rotate(45)"', svg)
        self.assertIn('<stop offset="0%" stop-color="#ff0000"/>', svg)
        self.assertIn('<stop offset="100%" stop-color="#00ff00"/>', svg)
        self.assertIn('fill="url(#gradient)"', svg)


class RenderCardTests(SimpleTestCase):
    """Tests for the full card."""

    def test_default_scenario(self):
        svg = render_card(make_data(), UiConfig())
        self.assertIn('@ada', svg)
        self.assertIn('<tspan class="text-bold">10</tspan> Followers', svg)
        self.assertIn('<tspan class="text-bold">5</tspan> Following', svg)
        self.assertEqual(svg.count('class="single-item-animation"'), 8)
        self.assertIn('width="535" height="245"', svg)
        self.assertIn('viewBox="0 0 535 245"', svg)
        self.assertIn("<title id=\"titleId\">Ada's GitHub Stats</title>", svg)
        self.assertIn('href="data:image/jpeg;base64,aW1n"', svg)
        self.assertIn('@keyframes fadeInAnimation', svg)
        self.assertIn('animation-delay: 210ms', svg)
        self.assertIn('animation-delay: 910ms', svg)

    def test_height_formula(self):
        cases = [
            ('repos,stars,forks,commits,prs,prs_merged,issues,contributed', '', 0),
            ('repos,stars', '', 6),
            ('', '', 8),
            ('', 'reviews,issues_closed', 10),
            ('', ','.join(OPT_IN_KEYS), 12),
        ]
        for hidden, shown, count in cases:
            with self.subTest(hidden=hidden, shown=shown):
                svg = render_card(make_data(), UiConfig(hidden_items=hidden, show_items=shown))
                expected = max(220, 45 + count * 25)
                self.assertEqual(card_height(count), expected)
                self.assertIn(f'height="{expected}"', svg)
                self.assertEqual(svg.count('class="text text-bold"'), count)

    def test_rows_are_offset_by_index(self):
        svg = render_card(make_data(), UiConfig())
        self.assertIn('<g transform="translate(230, 0)">', svg)
        self.assertIn('<g transform="translate(230, 175)">', svg)

    def test_unknown_locale_matches_fallback(self):
        data = make_data()
        self.assertEqual(
            render_card(data, UiConfig(locale='does-not-exist')),
            render_card(data, UiConfig(locale=FALLBACK_LOCALE)),
        )

    def test_render_is_idempotent(self):
        data = make_data()
        config = UiConfig(bg_color=['90', 'aaaaaa', 'bbbbbb'], show_items='reviews')
        self.assertEqual(render_card(data, config), render_card(data, config))

    def test_gradient_scenario(self):
        svg = render_card(make_data(), UiConfig(bg_color=['45', 'ff0000', '00ff00']))
        self.assertIn('rotate(45)', svg)
        self.assertIn('offset="0%"', svg)
        self.assertIn('offset="100%"', svg)

    def test_single_token_background_scenario(self):
        svg = render_card(make_data(), UiConfig(bg_color='112233'))
        self.assertIn('fill="#112233"', svg)
        self.assertNotIn('linearGradient', svg)

    def test_no_background(self):
        svg = render_card(make_data(), UiConfig(bg_color=None))
        self.assertNotIn('height="99.6%"', svg)

    def test_disabled_animations_scenario(self):
        svg = render_card(make_data(), UiConfig(disabled_animations='true'))
        self.assertNotIn('@keyframes', svg)
        self.assertNotIn('animation-delay', svg)
        self.assertIn('<text x="15" y="0" class="text-title">', svg)
        self.assertIn('<circle cx="120" cy="70" r="50"', svg)
        self.assertIn('<text x="119.9" y="140"', svg)

    def test_rtl_card(self):
        svg = render_card(make_data(), UiConfig(locale='ar'))
        self.assertIn('direction="rtl"', svg)
        self.assertIn('<text x="510" y="-10" class="text-title">', svg)
        # the username row stays left-to-right
        self.assertIn('direction="ltr" class="text-username', svg)

    def test_localized_labels_fall_back_per_key(self):
        svg = render_card(make_data(), UiConfig(locale='it', show_items='reviews'))
        self.assertIn('Statistiche GitHub di Ada', svg)
        self.assertIn('Repository totali:', svg)
        self.assertIn('Total PRs Reviewed:', svg)

    def test_name_substitution_is_literal(self):
        svg = render_card(make_data(name='{name} %s {0}'), UiConfig())
        self.assertIn("{name} %s {0}'s GitHub Stats", svg)

    def test_colors(self):
        svg = render_card(make_data(), UiConfig(title_color='111111', icon_color='222222'))
        self.assertIn('fill: #111111;', svg)
        self.assertIn('fill: #222222;', svg)

    def test_hidden_stroke(self):
        svg = render_card(make_data(), UiConfig(hide_stroke=True, stroke_color='abcdef'))
        self.assertNotIn('stroke="#abcdef"', svg)

    def test_injected_tables(self):
        locales = {'en': replace_title(LOCALES['en'], 'Stats for {name}')}
        svg = render_card(make_data(), UiConfig(), locales=locales)
        self.assertIn('Stats for Ada', svg)


def replace_title(entry: LocaleEntry, title: str) -> LocaleEntry:
    values = {key: getattr(entry, key) for key in LocaleEntry.TEXT_KEYS}
    values['title_card'] = title
    return LocaleEntry(code=entry.code, rtl_direction=entry.rtl_direction, **values)


class ThemeTests(SimpleTestCase):
    """Tests for theme presets."""

    def test_get_theme_default(self):
        theme = get_theme('neon_dark')
        self.assertEqual(theme.id, 'neon_dark')
        self.assertEqual(theme.bg_color, '0a0e27')

    def test_get_theme_invalid(self):
        """Test getting invalid theme returns default."""
        theme = get_theme('invalid_theme')
        self.assertEqual(theme.id, DEFAULT_THEME)

    def test_all_themes_render(self):
        for theme in THEMES.values():
            with self.subTest(theme=theme.id):
                config = replace(UiConfig(), **theme.colors())
                svg = render_card(make_data(), config)
                self.assertIn(f'fill: #{theme.title_color};', svg)


class FromQueryTests(SimpleTestCase):
    """Tests for building UiConfig from query parameters."""

    def test_empty_query_gives_defaults(self):
        self.assertEqual(from_query(QueryDict('')), UiConfig())

    def test_fields_are_mapped(self):
        config = from_query(QueryDict(
            'locale=es&titleColor=ff0000&hideBorder=true&disabledAnimations=1'
            '&hiddenItems=stars,forks&showItems=reviews&format=png&borderRadius=10'
        ))
        self.assertEqual(config.locale, 'es')
        self.assertEqual(config.title_color, 'ff0000')
        self.assertEqual(config.hide_border, 'true')
        self.assertEqual(config.disabled_animations, '1')
        self.assertEqual(config.hidden_items, 'stars,forks')
        self.assertEqual(config.show_items, 'reviews')
        self.assertEqual(config.format, 'png')
        self.assertEqual(config.border_radius, '10')

    def test_repeated_bg_color_is_a_list(self):
        config = from_query(QueryDict('bgColor=45&bgColor=ff0000&bgColor=00ff00'))
        self.assertEqual(config.bg_color, ['45', 'ff0000', '00ff00'])

    def test_single_bg_color_is_a_string(self):
        config = from_query(QueryDict('bgColor=45,ff0000,00ff00'))
        self.assertEqual(config.bg_color, '45,ff0000,00ff00')

    def test_theme_with_override(self):
        config = from_query({'theme': 'neon_dark', 'titleColor': '123456'})
        neon = get_theme('neon_dark')
        self.assertEqual(config.title_color, '123456')
        self.assertEqual(config.text_color, neon.text_color)
        self.assertEqual(config.bg_color, neon.bg_color)

    def test_plain_dict_with_list_values(self):
        config = from_query({'bgColor': ['90', 'aaaaaa'], 'locale': ['fr']})
        self.assertEqual(config.bg_color, ['90', 'aaaaaa'])
        self.assertEqual(config.locale, 'fr')


USER_PAYLOAD = {
    'data': {
        'user': {
            'name': 'Test User',
            'login': 'testuser',
            'avatarUrl': 'https://example.com/avatar.png',
            'followers': {'totalCount': 5},
            'following': {'totalCount': 3},
            'contributionsCollection': {
                'totalCommitContributions': 40,
                'restrictedContributionsCount': 2,
                'totalPullRequestReviewContributions': 7,
            },
            'repositoriesContributedTo': {'totalCount': 4},
            'pullRequests': {'totalCount': 9},
            'mergedPullRequests': {'totalCount': 6},
            'openIssues': {'totalCount': 2},
            'closedIssues': {'totalCount': 3},
            'repositoryDiscussions': {'totalCount': 1},
            'repositoryDiscussionComments': {'totalCount': 0},
            'repositories': {'totalCount': 12},
        }
    }
}


def repos_payload(nodes, has_next, cursor=None):
    return {
        'data': {
            'user': {
                'repositories': {
                    'nodes': nodes,
                    'pageInfo': {'hasNextPage': has_next, 'endCursor': cursor},
                }
            }
        }
    }


def json_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


def http_error(status_code, headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


class GitHubClientTests(SimpleTestCase):
    """Tests for the GitHub client."""

    def setUp(self):
        cache.clear()

    @patch('statscard.services.github_client.requests.get')
    @patch('statscard.services.github_client.requests.post')
    def test_get_card_data_success(self, mock_post, mock_get):
        mock_post.side_effect = [
            json_response(USER_PAYLOAD),
            json_response(repos_payload(
                [{'stargazerCount': 10, 'forkCount': 2}, {'stargazerCount': 5, 'forkCount': 1}],
                True, 'abc',
            )),
            json_response(repos_payload([{'stargazerCount': 1, 'forkCount': 0}], False)),
        ]
        avatar = MagicMock()
        avatar.content = b'img'
        mock_get.return_value = avatar

        data = GitHubClient(token='secret').get_card_data('testuser')

        self.assertEqual(data.name, 'Test User')
        self.assertEqual(data.username, 'testuser')
        self.assertEqual(data.pic, 'aW1n')
        self.assertEqual(data.public_repos, 12)
        self.assertEqual(data.total_stars, 16)
        self.assertEqual(data.total_forks, 3)
        self.assertEqual(data.total_commits, 42)
        self.assertEqual(data.total_prs, 9)
        self.assertEqual(data.total_prs_merged, 6)
        self.assertEqual(data.total_review, 7)
        self.assertEqual(data.total_issues, 5)
        self.assertEqual(data.total_closed_issues, 3)
        self.assertEqual(data.total_discussion_started, 1)
        self.assertEqual(data.total_discussion_answered, 0)
        self.assertEqual(data.total_contributed_to, 4)
        self.assertEqual(data.followers, 5)
        self.assertEqual(data.following, 3)

        last_variables = mock_post.call_args.kwargs['json']['variables']
        self.assertEqual(last_variables, {'login': 'testuser', 'after': 'abc'})
        self.assertEqual(mock_post.call_args.kwargs['headers']['Authorization'], 'bearer secret')

        # second call is served from the cache
        self.assertEqual(GitHubClient(token='secret').get_card_data('TestUser'), data)
        self.assertEqual(mock_post.call_count, 3)

    @patch('statscard.services.github_client.requests.get')
    @patch('statscard.services.github_client.requests.post')
    def test_name_falls_back_to_login(self, mock_post, mock_get):
        payload = {'data': {'user': dict(USER_PAYLOAD['data']['user'], name=None)}}
        mock_post.side_effect = [json_response(payload), json_response(repos_payload([], False))]
        mock_get.return_value = MagicMock(content=b'')

        data = GitHubClient(token='secret').get_card_data('testuser')
        self.assertEqual(data.name, 'testuser')
        self.assertEqual(data.total_stars, 0)

    @patch('statscard.services.github_client.requests.get')
    @patch('statscard.services.github_client.requests.post')
    def test_avatar_failure_degrades(self, mock_post, mock_get):
        mock_post.side_effect = [json_response(USER_PAYLOAD), json_response(repos_payload([], False))]
        mock_get.side_effect = requests.ConnectionError('boom')

        data = GitHubClient(token='secret').get_card_data('testuser')
        self.assertEqual(data.pic, '')

    @patch('statscard.services.github_client.requests.post')
    def test_user_not_found(self, mock_post):
        mock_post.return_value = json_response({
            'data': {'user': None},
            'errors': [{'type': 'NOT_FOUND', 'message': 'Could not resolve to a User'}],
        })
        with self.assertRaisesMessage(ValueError, "User 'ghost' not found on GitHub"):
            GitHubClient(token='secret').get_card_data('ghost')

    @patch('statscard.services.github_client.requests.post')
    def test_graphql_rate_limited(self, mock_post):
        mock_post.return_value = json_response({
            'errors': [{'type': 'RATE_LIMITED', 'message': 'API rate limit exceeded'}],
        })
        with self.assertRaisesMessage(ValueError, 'RATE_LIMIT_WITH_TOKEN'):
            GitHubClient(token='secret').get_card_data('testuser')

    @override_settings(GITHUB_TOKEN=None)
    @patch('statscard.services.github_client.requests.post')
    def test_http_rate_limit_without_token(self, mock_post):
        mock_post.return_value = http_error(403, {'X-RateLimit-Reset': '0'})
        with self.assertRaises(ValueError) as ctx:
            GitHubClient().get_card_data('testuser')
        self.assertIn('RATE_LIMIT_NO_TOKEN', str(ctx.exception))
        self.assertIn('Resets at 00:00:00 UTC', str(ctx.exception))

    @patch('statscard.services.github_client.requests.post')
    def test_http_rate_limit_with_unparseable_reset(self, mock_post):
        mock_post.return_value = http_error(403, {'X-RateLimit-Reset': 'soon'})
        with self.assertRaises(ValueError) as ctx:
            GitHubClient(token='secret').get_card_data('testuser')
        self.assertIn('RATE_LIMIT_WITH_TOKEN', str(ctx.exception))
        self.assertNotIn('Resets at', str(ctx.exception))

    @patch('statscard.services.github_client.requests.post')
    def test_unauthorized(self, mock_post):
        mock_post.return_value = http_error(401)
        with self.assertRaisesMessage(ValueError, 'authentication failed'):
            GitHubClient(token='bad').get_card_data('testuser')

    @patch('statscard.services.github_client.requests.post')
    def test_server_error(self, mock_post):
        mock_post.return_value = http_error(502)
        with self.assertRaisesMessage(ValueError, 'GitHub API error: 502'):
            GitHubClient(token='secret').get_card_data('testuser')

    @patch('statscard.services.github_client.requests.post')
    def test_http_not_found_is_a_plain_api_error(self, mock_post):
        mock_post.return_value = http_error(404)
        with self.assertRaises(ValueError) as ctx:
            GitHubClient(token='secret').get_card_data('testuser')
        self.assertEqual(str(ctx.exception), 'GitHub API error: 404')

    @patch('statscard.services.github_client.requests.post')
    def test_network_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('down')
        with self.assertRaisesMessage(ValueError, 'Network error'):
            GitHubClient(token='secret').get_card_data('testuser')


class ViewTests(SimpleTestCase):
    """Tests for views."""

    @patch('statscard.views.GitHubClient')
    def test_card_view(self, mock_client_class):
        """Test SVG card generation."""
        mock_client = MagicMock()
        mock_client.get_card_data.return_value = make_data()
        mock_client_class.return_value = mock_client

        response = self.client.get('/card/ada.svg')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'image/svg+xml')
        self.assertEqual(response['Cache-Control'], 'public, max-age=3600')
        self.assertIn('@ada', response.content.decode())
        mock_client.get_card_data.assert_called_once_with('ada')

    @patch('statscard.views.GitHubClient')
    def test_api_view_with_options(self, mock_client_class):
        mock_client_class.return_value.get_card_data.return_value = make_data()

        response = self.client.get('/api/', {
            'username': 'ada',
            'disabledAnimations': 'true',
            'bgColor': '45,ff0000,00ff00',
            'showItems': 'reviews',
        })
        content = response.content.decode()
        self.assertEqual(response.status_code, 200)
        self.assertNotIn('@keyframes', content)
        self.assertIn('rotate(45)', content)
        self.assertIn('height="270"', content)

    def test_missing_username(self):
        response = self.client.get('/api/')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response['Content-Type'], 'image/svg+xml')

    @patch('statscard.views.GitHubClient')
    def test_user_not_found(self, mock_client_class):
        mock_client_class.return_value.get_card_data.side_effect = ValueError("User 'ghost' not found on GitHub")

        response = self.client.get('/card/ghost.svg')
        self.assertEqual(response.status_code, 404)
        self.assertIn('not found', response.content.decode())

    @patch('statscard.views.GitHubClient')
    def test_rate_limit(self, mock_client_class):
        mock_client_class.return_value.get_card_data.side_effect = ValueError(
            "GitHub API rate limit exceeded. RATE_LIMIT_NO_TOKEN"
        )

        response = self.client.get('/card/ada.svg')
        self.assertEqual(response.status_code, 429)
        self.assertNotIn('RATE_LIMIT_NO_TOKEN', response.content.decode())

    @patch('statscard.views.render_card')
    @patch('statscard.views.GitHubClient')
    def test_render_failure(self, mock_client_class, mock_render):
        mock_client_class.return_value.get_card_data.return_value = make_data()
        mock_render.side_effect = RuntimeError('broken')

        with self.assertLogs('statscard.views', level='ERROR'):
            response = self.client.get('/card/ada.svg')
        self.assertEqual(response.status_code, 500)

    @patch('statscard.views.GitHubClient')
    def test_error_message_is_escaped(self, mock_client_class):
        mock_client_class.return_value.get_card_data.side_effect = ValueError('<script>')

        response = self.client.get('/card/ada.svg')
        self.assertNotIn('<script>', response.content.decode())
        self.assertIn('&lt;script&gt;', response.content.decode())

    def test_post_not_allowed(self):
        response = self.client.post('/card/ada.svg')
        self.assertEqual(response.status_code, 405)
