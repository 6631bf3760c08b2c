"""Filter and sort projection of the application collection.

Pure read side: takes the current collection and returns a freshly ordered
list for display. Never mutates its input and never reads the clock.

Sort Orders:
    - recent: submitted_at descending
    - score: score descending, a missing score compares as 0
    - name: ascending, locale-aware (see collation_key)

All three are stable: records comparing equal keep their input order.

Usage:
    from src.application.queries.application_projection import project_applications

    visible = project_applications(store.items, ReviewFilter(q="ananya"), SortKey.NAME)
"""

from collections.abc import Iterable
import unicodedata

from src.domain.entities import Application
from src.domain.enums import SortKey
from src.domain.value_objects import ALL, ReviewFilter


def collation_key(text: str) -> tuple[str, str]:
    """Locale-independent collation key for display names.

    Primary key is the text decomposed (NFKD), stripped of combining marks
    and casefolded, so "Émile" sorts with "emile" and "Zoë" with "zoe".
    The raw string breaks ties, which keeps the order total.

    Args:
        text: Display string.

    Returns:
        (primary, raw) tuple suitable as a sort key.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def _score_key(app: Application) -> float:
    # Missing score compares as 0; the stored value is untouched
    return app.score if app.score is not None else 0


def _keep(app: Application, review_filter: ReviewFilter, needle: str) -> bool:
    if review_filter.status != ALL and app.status != review_filter.status:
        return False
    if review_filter.program != ALL and app.program != review_filter.program:
        return False
    return not needle or app.matches(needle)


def project_applications(
    items: Iterable[Application],
    review_filter: ReviewFilter,
    sort: SortKey | str = SortKey.RECENT,
) -> list[Application]:
    """Apply filter criteria and ordering.

    Args:
        items: Current collection in insertion order.
        review_filter: Status, program and free-text criteria.
        sort: Sort order.

    Returns:
        New list of the matching applications (the same entity objects).

    Raises:
        ValueError: If ``sort`` is not a SortKey value.
    """
    sort_key = SortKey(sort)
    needle = review_filter.needle
    result = [app for app in items if _keep(app, review_filter, needle)]

    match sort_key:
        case SortKey.SCORE:
            result.sort(key=_score_key, reverse=True)
        case SortKey.NAME:
            result.sort(key=lambda app: collation_key(app.name))
        case SortKey.RECENT:
            result.sort(key=lambda app: app.submitted_at, reverse=True)

    return result
