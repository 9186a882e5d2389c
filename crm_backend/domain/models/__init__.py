"""ORM models; importing this package registers every table on Base.metadata."""

from crm_backend.domain.models.user import User, ROLE_ADMIN, ROLE_USER, ROLES
from crm_backend.domain.models.session import AuthSession
from crm_backend.domain.models.lead import Lead
from crm_backend.domain.models.account import Account
from crm_backend.domain.models.deal import ActiveDeal
from crm_backend.domain.models.contact import Contact

__all__ = [
    "User",
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLES",
    "AuthSession",
    "Lead",
    "Account",
    "ActiveDeal",
    "Contact",
]
