from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PersonnelStatus
from .model import Personnel


class PersonnelRepository(Protocol):
    def list_all(self) -> Sequence[Personnel]:
        raise NotImplementedError

    def list_separated(self) -> Sequence[Personnel]:
        """Everyone whose status is not Active, most recently updated first."""
        raise NotImplementedError

    def get(self, personnel_id: int) -> Optional[Personnel]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Personnel]:
        raise NotImplementedError

    def create(self, person: Personnel) -> int:
        raise NotImplementedError

    def update(self, person: Personnel) -> None:
        raise NotImplementedError

    def set_status(self, personnel_id: int, status: PersonnelStatus) -> bool:
        raise NotImplementedError

    def update_balances(self, personnel_id: int, balances: dict) -> None:
        raise NotImplementedError

    def delete(self, personnel_id: int) -> bool:
        raise NotImplementedError


class RosterRepository(Protocol):
    """Personnel copy kept in the local store for placement and promotion."""

    def list_all(self) -> Sequence[Personnel]:
        raise NotImplementedError

    def get(self, personnel_id: int) -> Optional[Personnel]:
        raise NotImplementedError

    def save(self, person: Personnel) -> None:
        raise NotImplementedError

    def add(self, person: Personnel) -> int:
        raise NotImplementedError
