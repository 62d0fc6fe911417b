"""
GitHub API client that collects the numbers shown on the stats card.
"""
import base64
import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardData:
    """Data transfer object for one user's card."""
    name: str
    username: str
    pic: str  # base64-encoded avatar, passed through untouched
    public_repos: int
    total_stars: int
    total_forks: int
    total_commits: int
    total_prs: int
    total_prs_merged: int
    total_review: int
    total_issues: int
    total_closed_issues: int
    total_discussion_started: int
    total_discussion_answered: int
    total_contributed_to: int
    followers: int
    following: int


USER_QUERY = """
query userInfo($login: String!) {
  user(login: $login) {
    name
    login
    avatarUrl
    followers { totalCount }
    following { totalCount }
    contributionsCollection {
      totalCommitContributions
      restrictedContributionsCount
      totalPullRequestReviewContributions
    }
    repositoriesContributedTo(first: 1, contributionTypes: [COMMIT, ISSUE, PULL_REQUEST, REPOSITORY]) {
      totalCount
    }
    pullRequests(first: 1) { totalCount }
    mergedPullRequests: pullRequests(states: MERGED) { totalCount }
    openIssues: issues(states: OPEN) { totalCount }
    closedIssues: issues(states: CLOSED) { totalCount }
    repositoryDiscussions { totalCount }
    repositoryDiscussionComments(onlyAnswers: true) { totalCount }
    repositories(ownerAffiliations: OWNER, privacy: PUBLIC) { totalCount }
  }
}
"""

REPOS_QUERY = """
query userRepos($login: String!, $after: String) {
  user(login: $login) {
    repositories(first: 100, ownerAffiliations: OWNER, privacy: PUBLIC, after: $after) {
      nodes { stargazerCount forkCount }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""


class GraphQLError(Exception):
    """An error entry returned in a GraphQL response body."""

    def __init__(self, message: str, error_type: Optional[str] = None):
        super().__init__(message)
        self.type = error_type


class GitHubClient:
    """Client for the GitHub GraphQL API."""

    GRAPHQL_URL = "https://api.github.com/graphql"

    def __init__(self, token: Optional[str] = None):
        self.token = token or getattr(settings, 'GITHUB_TOKEN', None)
        self.headers = {
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'GitHub-Stats-Card/1.0',
        }
        if self.token:
            self.headers['Authorization'] = f'bearer {self.token}'

    def _post(self, query: str, variables: Dict) -> Dict:
        """Run a GraphQL query and return its ``data`` member."""
        response = requests.post(
            self.GRAPHQL_URL,
            headers=self.headers,
            json={'query': query, 'variables': variables},
            timeout=10,
        )
        response.raise_for_status()
        payload = response.json()
        errors = payload.get('errors')
        if errors:
            first = errors[0]
            raise GraphQLError(first.get('message', 'Unknown error'), first.get('type'))
        return payload['data']

    def get_card_data(self, username: str) -> CardData:
        """
        Fetch everything the card displays for a user.
        Uses caching to avoid excessive API calls.
        """
        cache_key = f"card_data_{username.lower()}"
        cached = cache.get(cache_key)
        if cached:
            logger.debug("Card data cache hit for %s", username)
            return CardData(**json.loads(cached))

        try:
            user = self._post(USER_QUERY, {'login': username})['user']
            if user is None:
                raise GraphQLError(f"Could not resolve to a User with the login of '{username}'.", 'NOT_FOUND')

            totals = self._sum_repositories(username)
            contributions = user['contributionsCollection']

            data = CardData(
                name=user.get('name') or user['login'],
                username=user['login'],
                pic=self._get_avatar_base64(user.get('avatarUrl', '')),
                public_repos=user['repositories']['totalCount'],
                total_stars=totals['stars'],
                total_forks=totals['forks'],
                total_commits=(
                    contributions['totalCommitContributions']
                    + contributions['restrictedContributionsCount']
                ),
                total_prs=user['pullRequests']['totalCount'],
                total_prs_merged=user['mergedPullRequests']['totalCount'],
                total_review=contributions['totalPullRequestReviewContributions'],
                total_issues=user['openIssues']['totalCount'] + user['closedIssues']['totalCount'],
                total_closed_issues=user['closedIssues']['totalCount'],
                total_discussion_started=user['repositoryDiscussions']['totalCount'],
                total_discussion_answered=user['repositoryDiscussionComments']['totalCount'],
                total_contributed_to=user['repositoriesContributedTo']['totalCount'],
                followers=user['followers']['totalCount'],
                following=user['following']['totalCount'],
            )

            # Cache the result
            cache_timeout = getattr(settings, 'GITHUB_CACHE_TIMEOUT', 1800)
            cache.set(cache_key, json.dumps(data.__dict__), cache_timeout)

            return data

        except GraphQLError as e:
            logger.warning("GraphQL error for %s: %s", username, e)
            if e.type == 'NOT_FOUND':
                raise ValueError(f"User '{username}' not found on GitHub")
            if e.type == 'RATE_LIMITED':
                raise ValueError(self._rate_limit_message())
            raise ValueError(f"GitHub API error: {e}")
        except requests.exceptions.HTTPError as e:
            status_code = getattr(e.response, 'status_code', None)
            logger.warning("GitHub API returned %s for %s", status_code, username)
            if status_code == 401:
                raise ValueError("GitHub API authentication failed. Check GITHUB_TOKEN.")
            if status_code in (403, 429):
                reset = None
                if e.response is not None and hasattr(e.response, 'headers'):
                    reset = e.response.headers.get('X-RateLimit-Reset')
                raise ValueError(self._rate_limit_message(reset))
            if status_code is not None:
                raise ValueError(f"GitHub API error: {status_code}")
            raise ValueError(f"GitHub API error: {str(e)}")
        except requests.exceptions.RequestException as e:
            logger.warning("Network error fetching %s: %s", username, e)
            raise ValueError(f"Network error: {str(e)}")
        except (KeyError, TypeError) as e:
            raise ValueError(f"Unexpected GitHub API response: {str(e)}")

    def _rate_limit_message(self, reset: Optional[str] = None) -> str:
        error_msg = "GitHub API rate limit exceeded."
        if not self.token:
            error_msg += " RATE_LIMIT_NO_TOKEN"
        else:
            error_msg += " RATE_LIMIT_WITH_TOKEN"
        if reset and reset.isdigit():
            import datetime
            reset_time = datetime.datetime.fromtimestamp(int(reset), tz=datetime.timezone.utc)
            error_msg += f" Resets at {reset_time.strftime('%H:%M:%S UTC')}"
        return error_msg

    def _sum_repositories(self, username: str) -> Dict[str, int]:
        """Page through owned public repositories, summing stars and forks."""
        stars = 0
        forks = 0
        after = None
        while True:
            repositories = self._post(REPOS_QUERY, {'login': username, 'after': after})['user']['repositories']
            nodes: List[Dict] = repositories['nodes']
            stars += sum(node.get('stargazerCount', 0) for node in nodes)
            forks += sum(node.get('forkCount', 0) for node in nodes)
            page_info = repositories['pageInfo']
            if not nodes or not page_info['hasNextPage']:
                break
            after = page_info['endCursor']
        return {'stars': stars, 'forks': forks}

    def _get_avatar_base64(self, avatar_url: str) -> str:
        """Fetch the avatar image and return it base64-encoded, or '' on failure."""
        if not avatar_url:
            return ''
        try:
            response = requests.get(avatar_url, timeout=5, headers={
                'User-Agent': self.headers['User-Agent'],
            })
            response.raise_for_status()
            return base64.b64encode(response.content).decode('utf-8')
        except requests.exceptions.RequestException as e:
            logger.warning("Error fetching avatar %s: %s", avatar_url, e)
            return ''
