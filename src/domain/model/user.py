from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ExternalAccountLink:
    """Connection state of the user's QuickBooks Online company."""
    connected: bool = False
    realm_id: str | None = None
    connected_at: datetime | None = None


@dataclass
class User:
    """Domain model representing a registered account."""
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    first_name: str | None = None
    last_name: str | None = None
    last_login: datetime | None = None
    password_hash: str | None = None
    quickbooks: ExternalAccountLink = field(default_factory=ExternalAccountLink)

    @staticmethod
    def display_name(name: str | None, first_name: str | None, last_name: str | None) -> str:
        """Return `name`, or "first last" when no explicit name was given."""
        if name and name.strip():
            return name.strip()
        return f"{first_name or ''} {last_name or ''}".strip()
