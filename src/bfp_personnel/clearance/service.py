from __future__ import annotations

from datetime import date
from typing import Callable, List, Sequence

from ..common.datetime_utils import today_local
from ..common.logger import get_logger
from ..core.enums import ClearanceStatus, ClearanceType, coerce_enum
from ..core.exceptions import NotFoundError, ValidationError
from ..personnel.repository import PersonnelRepository
from .model import SEPARATION_STATUS, ClearanceRequest
from .repository import ClearanceRepository

logger = get_logger(__name__)


def remove_duplicates(requests: Sequence[ClearanceRequest]) -> List[ClearanceRequest]:
    """Keep the first of each (username, type, date, status) combination."""
    seen = set()
    out = []
    for req in requests:
        if req.dedup_key in seen:
            logger.debug("Duplicate clearance request removed: %s", req.dedup_key)
            continue
        seen.add(req.dedup_key)
        out.append(req)
    return out


class ClearanceService:
    def __init__(
        self,
        clearances: ClearanceRepository,
        personnel: PersonnelRepository,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._clearances = clearances
        self._personnel = personnel
        self._today = today

    def list_requests(self) -> List[ClearanceRequest]:
        return remove_duplicates(self._clearances.list_all())

    def list_for_user(self, username: str) -> List[ClearanceRequest]:
        """The acting employee's own requests; nobody signed in sees none."""
        username = (username or "").strip()
        if not username:
            return []
        return [r for r in self.list_requests() if r.username == username]

    def initiate(self, *, username: str, clearance_type: str) -> int:
        username = (username or "").strip()
        kind = coerce_enum(ClearanceType, clearance_type, None)
        if not username or kind is None:
            raise ValidationError("Please select both Employee and Clearance Type.")
        if self._personnel.get_by_username(username) is None:
            raise ValidationError(f"No personnel found for username: {username}")

        return self._clearances.create(
            ClearanceRequest(
                id=0,
                username=username,
                clearance_type=kind.value,
                date_requested=self._today(),
            )
        )

    def set_status(self, request_id: int, status: str) -> None:
        target = coerce_enum(ClearanceStatus, status, None)
        if target is None:
            raise ValidationError(f"Unknown clearance status: {status}")

        req = self._clearances.get(int(request_id))
        if req is None:
            raise NotFoundError("Clearance request not found.")
        self._clearances.set_status(req.id, target)

        separation = SEPARATION_STATUS.get(req.clearance_type)
        if target == ClearanceStatus.COMPLETED and separation is not None and req.personnel_id is not None:
            self._personnel.set_status(req.personnel_id, separation)
            logger.info("Personnel %s separated as %s", req.username, separation.value)
