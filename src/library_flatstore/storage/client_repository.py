"""Client store: library members keyed by phone number."""

from ..models.client import Client
from .repository import RecordStore


class ClientStore(RecordStore[Client]):
    """Store for clients."""

    @property
    def entity_class(self) -> type[Client]:
        return Client

    def decode(self, line: str) -> Client:
        return Client.decode(line)
