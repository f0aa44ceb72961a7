from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Resident


class ResidentRepository(Protocol):
    """Roster store interface.

    Services depend on this protocol, never on a concrete database.
    """

    def list(self) -> Sequence[Resident]:
        raise NotImplementedError

    def get_by_id(self, resident_id: str) -> Optional[Resident]:
        raise NotImplementedError

    def insert(self, resident: Resident) -> Resident:
        raise NotImplementedError

    def update(self, resident: Resident) -> bool:
        raise NotImplementedError

    def delete(self, resident_id: str) -> bool:
        raise NotImplementedError
