"""As-of resolver

Picks, for every identity, the single version in effect at a query date.
Versions dated after the query date are ignored. Among the rest, an
amendment always beats a sale; within the winning kind the latest date
wins and the higher insertion sequence breaks date ties.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from .versions import Identity, LineItemVersion, VersionIndex


def _recency(version: LineItemVersion):
    return (version.effective_date, version.sequence)


def select_effective_version(
    versions: Iterable[LineItemVersion],
    query_date: datetime
) -> Optional[LineItemVersion]:
    """Return the version in effect at query_date, or None if none is yet"""
    admissible = [v for v in versions if v.effective_date <= query_date]
    if not admissible:
        return None

    amendments = [v for v in admissible if v.is_amendment]
    if amendments:
        return max(amendments, key=_recency)
    return max(admissible, key=_recency)


def resolve_as_of(index: VersionIndex, query_date: datetime) -> Dict[Identity, LineItemVersion]:
    """
    Resolve every identity in the index as of query_date
    
    Identities with no version at or before query_date are absent from
    the result.
    """
    resolved: Dict[Identity, LineItemVersion] = {}
    for identity, versions in index.items():
        winner = select_effective_version(versions, query_date)
        if winner is not None:
            resolved[identity] = winner
    return resolved
