"""Error types raised by the ledger services"""

from typing import Any, Dict, List, Optional


class LedgerError(Exception):
    """Base class for ledger service errors"""
    pass


class LedgerValidationError(LedgerError):
    """Input was rejected: a malformed event or query date"""
    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class StorageError(LedgerError):
    """The storage collaborator failed"""
    pass
