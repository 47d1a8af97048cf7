"""As-of reconstruction of line items and the net tax position"""

from .versions import Identity, LineItemVersion, OriginKind, VersionIndex
from .temporal_index import build_version_index
from .as_of_resolver import resolve_as_of, select_effective_version
from .position_aggregator import total_tax, total_payments, net_position

__all__ = [
    "Identity",
    "LineItemVersion",
    "OriginKind",
    "VersionIndex",
    "build_version_index",
    "resolve_as_of",
    "select_effective_version",
    "total_tax",
    "total_payments",
    "net_position",
]
