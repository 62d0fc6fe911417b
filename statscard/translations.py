"""
Locale strings for the stats card.
"""
from typing import Dict, Optional


class LocaleEntry:
    """Display strings for one locale. Missing keys are ``None``."""

    TEXT_KEYS = (
        'title_card',
        'followers_text',
        'following_text',
        'total_repos_text',
        'stars_count_text',
        'forks_count_text',
        'commits_count_text',
        'total_pr_text',
        'total_pr_merged_text',
        'total_pr_reviewed_text',
        'total_issues_text',
        'total_issues_closed_text',
        'total_discussion_started_text',
        'total_discussion_answered_text',
        'contributed_to_text',
    )

    def __init__(
        self,
        code: str,
        title_card: Optional[str] = None,
        followers_text: Optional[str] = None,
        following_text: Optional[str] = None,
        total_repos_text: Optional[str] = None,
        stars_count_text: Optional[str] = None,
        forks_count_text: Optional[str] = None,
        commits_count_text: Optional[str] = None,
        total_pr_text: Optional[str] = None,
        total_pr_merged_text: Optional[str] = None,
        total_pr_reviewed_text: Optional[str] = None,
        total_issues_text: Optional[str] = None,
        total_issues_closed_text: Optional[str] = None,
        total_discussion_started_text: Optional[str] = None,
        total_discussion_answered_text: Optional[str] = None,
        contributed_to_text: Optional[str] = None,
        rtl_direction: object = False,
    ):
        self.code = code
        self.title_card = title_card
        self.followers_text = followers_text
        self.following_text = following_text
        self.total_repos_text = total_repos_text
        self.stars_count_text = stars_count_text
        self.forks_count_text = forks_count_text
        self.commits_count_text = commits_count_text
        self.total_pr_text = total_pr_text
        self.total_pr_merged_text = total_pr_merged_text
        self.total_pr_reviewed_text = total_pr_reviewed_text
        self.total_issues_text = total_issues_text
        self.total_issues_closed_text = total_issues_closed_text
        self.total_discussion_started_text = total_discussion_started_text
        self.total_discussion_answered_text = total_discussion_answered_text
        self.contributed_to_text = contributed_to_text
        self.rtl_direction = rtl_direction

    def text(self, key: str, fallback: 'LocaleEntry') -> str:
        """Return ``key`` from this locale, or from ``fallback`` when unset."""
        return getattr(self, key) or getattr(fallback, key)


FALLBACK_LOCALE = 'en'

# Locale registry
LOCALES: Dict[str, LocaleEntry] = {
    'en': LocaleEntry(
        code='en',
        title_card="{name}'s GitHub Stats",
        followers_text='Followers',
        following_text='Following',
        total_repos_text='Total Repositories',
        stars_count_text='Total Stars Earned',
        forks_count_text='Total Forks',
        commits_count_text='Total Commits',
        total_pr_text='Total PRs',
        total_pr_merged_text='Total PRs Merged',
        total_pr_reviewed_text='Total PRs Reviewed',
        total_issues_text='Total Issues',
        total_issues_closed_text='Total Issues Closed',
        total_discussion_started_text='Total Discussions Started',
        total_discussion_answered_text='Total Discussions Answered',
        contributed_to_text='Contributed to (last year)',
    ),
    'es': LocaleEntry(
        code='es',
        title_card='Estadísticas de GitHub de {name}',
        followers_text='Seguidores',
        following_text='Siguiendo',
        total_repos_text='Repositorios totales',
        stars_count_text='Estrellas obtenidas',
        forks_count_text='Forks totales',
        commits_count_text='Commits totales',
        total_pr_text='PRs totales',
        total_pr_merged_text='PRs fusionados',
        total_pr_reviewed_text='PRs revisados',
        total_issues_text='Issues totales',
        total_issues_closed_text='Issues cerrados',
        total_discussion_started_text='Discusiones iniciadas',
        total_discussion_answered_text='Discusiones respondidas',
        contributed_to_text='Contribuciones (último año)',
    ),
    'fr': LocaleEntry(
        code='fr',
        title_card='Statistiques GitHub de {name}',
        followers_text='Abonnés',
        following_text='Abonnements',
        total_repos_text='Total des dépôts',
        stars_count_text="Total d'étoiles",
        forks_count_text='Total des forks',
        commits_count_text='Total des commits',
        total_pr_text='Total des PR',
        total_pr_merged_text='Total des PR fusionnées',
        total_pr_reviewed_text='Total des PR relues',
        total_issues_text='Total des issues',
        total_issues_closed_text='Total des issues fermées',
        contributed_to_text="Contributions (l'an dernier)",
    ),
    'de': LocaleEntry(
        code='de',
        title_card='GitHub-Statistiken von {name}',
        followers_text='Follower',
        following_text='Folgt',
        total_repos_text='Repositories insgesamt',
        stars_count_text='Sterne insgesamt',
        forks_count_text='Forks insgesamt',
        commits_count_text='Commits insgesamt',
        total_pr_text='PRs insgesamt',
        total_pr_merged_text='Gemergte PRs',
        total_pr_reviewed_text='Überprüfte PRs',
        total_issues_text='Issues insgesamt',
        total_issues_closed_text='Geschlossene Issues',
        contributed_to_text='Beigetragen zu (letztes Jahr)',
    ),
    'pt-br': LocaleEntry(
        code='pt-br',
        title_card='Estatísticas do GitHub de {name}',
        followers_text='Seguidores',
        following_text='Seguindo',
        total_repos_text='Total de repositórios',
        stars_count_text='Total de estrelas',
        forks_count_text='Total de forks',
        commits_count_text='Total de commits',
        total_pr_text='Total de PRs',
        total_pr_merged_text='Total de PRs mesclados',
        total_issues_text='Total de issues',
        contributed_to_text='Contribuiu para (último ano)',
    ),
    'it': LocaleEntry(
        code='it',
        title_card='Statistiche GitHub di {name}',
        followers_text='Follower',
        following_text='Seguiti',
        total_repos_text='Repository totali',
        stars_count_text='Stelle totali',
        forks_count_text='Fork totali',
        commits_count_text='Commit totali',
        total_pr_text='PR totali',
        total_issues_text='Issue totali',
    ),
    'ar': LocaleEntry(
        code='ar',
        title_card='إحصائيات GitHub لـ {name}',
        followers_text='المتابعون',
        following_text='يتابع',
        total_repos_text='إجمالي المستودعات',
        stars_count_text='إجمالي النجوم',
        forks_count_text='إجمالي التفرعات',
        commits_count_text='إجمالي الإيداعات',
        total_pr_text='إجمالي طلبات السحب',
        total_issues_text='إجمالي المشكلات',
        rtl_direction=True,
    ),
    'he': LocaleEntry(
        code='he',
        title_card='הסטטיסטיקות של {name} ב-GitHub',
        followers_text='עוקבים',
        following_text='נעקבים',
        total_repos_text='סך הכל מאגרים',
        stars_count_text='סך הכל כוכבים',
        commits_count_text='סך הכל קומיטים',
        rtl_direction='true',
    ),
}


def get_locale(code: str, locales: Optional[Dict[str, LocaleEntry]] = None) -> LocaleEntry:
    """Get a locale by code, returning the fallback locale if not found."""
    if locales is None:
        locales = LOCALES
    return locales.get(code) or locales[FALLBACK_LOCALE]
