from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import Resident
from .repository import ResidentRepository


class InMemoryResidentRepository(ResidentRepository):
    def __init__(self, residents: Iterable[Resident] = ()):
        self._by_id: dict[str, Resident] = {r.resident_id: r for r in residents}

    def list(self) -> Sequence[Resident]:
        return list(self._by_id.values())

    def get_by_id(self, resident_id: str) -> Optional[Resident]:
        return self._by_id.get(resident_id)

    def insert(self, resident: Resident) -> Resident:
        if resident.resident_id in self._by_id:
            raise ValidationError(f"Resident {resident.resident_id} already exists")
        self._by_id[resident.resident_id] = resident
        return resident

    def update(self, resident: Resident) -> bool:
        if resident.resident_id not in self._by_id:
            return False
        self._by_id[resident.resident_id] = resident
        return True

    def delete(self, resident_id: str) -> bool:
        return self._by_id.pop(resident_id, None) is not None
