"""Session key construction.

Every session key is ``{prefix}{unique_id}``:
- prefix: namespace constant supplied at construction, so tickets never
  collide with unrelated entries sharing the same backend
- unique_id: UUID4 in hex (122 random bits from the OS CSPRNG)

The key handed to the client IS the cache key; there is no second mapping.

Usage:
    keys = TicketKeys(prefix="ticketstore:session:")
    key = keys.new_key()  # "ticketstore:session:3f2b...e9"
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class TicketKeys:
    """Session key generator for one namespace.

    Attributes:
        prefix: Namespace prefix (e.g. "ticketstore:session:").

    Example:
        keys = TicketKeys(prefix="tenant-a:session:")
        keys.owns("tenant-a:session:abc")  # True
    """

    prefix: str

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("Ticket key prefix must not be empty")

    def new_key(self) -> str:
        """Generate a fresh session key.

        Returns:
            Prefixed key with a 32-character hex UUID4 suffix.
        """
        return f"{self.prefix}{uuid4().hex}"

    def owns(self, key: str) -> bool:
        """Check whether key belongs to this namespace."""
        return key.startswith(self.prefix) and len(key) > len(self.prefix)

    @staticmethod
    def hint(key: str) -> str:
        """Last 8 characters of the key, for log correlation."""
        return key[-8:]
