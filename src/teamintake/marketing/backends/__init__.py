"""Marketing backends module."""

import hashlib
from dataclasses import dataclass, field


@dataclass
class ContactData:
    """Contact data for marketing list integration."""

    email: str
    first_name: str = ""
    last_name: str = ""
    tags: set[str] = field(default_factory=set)
    merge_fields: dict[str, str] = field(default_factory=dict)
    list_id: str | None = None


def subscriber_hash(email: str) -> str:
    """Return the identifier of a list member: MD5 of the lowercased email."""
    return hashlib.md5(email.lower().encode(), usedforsecurity=False).hexdigest()
