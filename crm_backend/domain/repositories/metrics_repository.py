"""
Metrics Repository Interface.
Read-only counting queries over the business tables.
"""

from typing import Any, Dict, List, Optional, Protocol


class MetricsRepository(Protocol):
    """A ``created_by`` of None means organization-wide."""

    def count_leads(self, created_by: Optional[str] = None) -> int:
        ...

    def count_accounts(self, created_by: Optional[str] = None) -> int:
        ...

    def count_deals(self, created_by: Optional[str] = None) -> int:
        ...

    def count_contacts(self, created_by: Optional[str] = None) -> int:
        ...

    def recent_activities(self, created_by: Optional[str] = None, limit: int = 10) -> List[Dict[str, Any]]:
        """Latest leads, accounts and deals merged by creation time."""
        ...
