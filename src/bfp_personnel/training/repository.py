from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Training


class TrainingRepository(Protocol):
    def list_all(self) -> Sequence[Training]:
        raise NotImplementedError

    def get(self, training_id: int) -> Optional[Training]:
        raise NotImplementedError

    def create(self, training: Training) -> int:
        raise NotImplementedError

    def update(self, training: Training) -> None:
        raise NotImplementedError

    def delete(self, training_id: int) -> bool:
        raise NotImplementedError
