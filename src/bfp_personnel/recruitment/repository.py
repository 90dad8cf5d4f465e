from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Candidate


class RecruitmentRepository(Protocol):
    def list_all(self) -> Sequence[Candidate]:
        raise NotImplementedError

    def get(self, candidate_id: int) -> Optional[Candidate]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Candidate]:
        raise NotImplementedError

    def create(self, candidate: Candidate) -> int:
        raise NotImplementedError

    def update(self, candidate: Candidate) -> None:
        raise NotImplementedError

    def delete(self, candidate_id: int) -> bool:
        raise NotImplementedError
