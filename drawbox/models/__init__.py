"""ORM models."""

from drawbox.models.admin_session import AdminSession
from drawbox.models.history_entry import HistoryEntryRow
from drawbox.models.pending_override import PendingOverrideRow

__all__ = ["AdminSession", "HistoryEntryRow", "PendingOverrideRow"]
