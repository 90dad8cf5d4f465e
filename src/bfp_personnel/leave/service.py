from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import inclusive_days, today_local
from ..common.logger import get_logger
from ..common.validators import optional_text, require_order
from ..core.enums import LeaveStatus, LeaveType, coerce_enum
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from ..personnel.repository import PersonnelRepository
from .model import LeaveRecord, LeaveRequest
from .repository import LeaveRecordRepository, LeaveRepository

logger = get_logger(__name__)


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        personnel: PersonnelRepository,
        records: Optional[LeaveRecordRepository] = None,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._leaves = leaves
        self._personnel = personnel
        self._records = records
        self._today = today

    def list_requests(self) -> Sequence[LeaveRequest]:
        return self._leaves.list_all()

    def list_for_user(self, username: str) -> Sequence[LeaveRequest]:
        return self._leaves.list_all(username=username)

    def list_local_records(self) -> Sequence[LeaveRecord]:
        if self._records is None:
            return []
        return self._records.list_records()

    # -------- decisions --------
    def _decide(
        self,
        request_id: int,
        status: LeaveStatus,
        approver: str,
        reason: Optional[str] = None,
    ) -> LeaveRequest:
        current = self._leaves.get(int(request_id))
        if current is None:
            raise NotFoundError("Leave request not found.")
        if current.status != LeaveStatus.PENDING:
            raise ValidationError(f"This request has already been {current.status.value.lower()}.")

        decided = self._leaves.decide(
            int(request_id),
            status=status,
            approved_by=approver or "Admin",
            reason=reason,
        )
        if not decided:
            # Someone else decided it between the read and the update
            raise ValidationError("This request has already been processed.")
        logger.info("Leave request %s %s by %s", request_id, status.value.lower(), approver)
        return current

    def approve(self, request_id: int, *, approver: str) -> None:
        req = self._decide(request_id, LeaveStatus.APPROVED, approver)
        self._deduct_balance(req)

    def reject(self, request_id: int, *, approver: str, reason: str = "") -> None:
        self._decide(request_id, LeaveStatus.REJECTED, approver, optional_text(reason))

    def _deduct_balance(self, req: LeaveRequest) -> None:
        column = req.balance_column
        if column is None or req.personnel_id is None:
            return
        try:
            employee = self._personnel.get(req.personnel_id)
            if employee is None:
                logger.warning("Leave %s approved but personnel %s no longer exists", req.id, req.personnel_id)
                return
            balance = getattr(employee, column)
            if balance is None:
                return
            remaining = max(0.0, float(balance) - float(req.num_days))
            self._personnel.update_balances(employee.id, {column: remaining})
            logger.info("Updated %s for personnel %s: %s - %s = %s", column, employee.id, balance, req.num_days, remaining)
        except BackendError as e:
            logger.error("Failed to update leave balance for personnel %s: %s", req.personnel_id, e)

    # -------- filing --------
    def file_leave(
        self,
        *,
        username: str,
        leave_type: str,
        start_date: Optional[date],
        end_date: Optional[date],
        location: str = "",
        reason: str = "",
    ) -> int:
        employee = self._personnel.get_by_username((username or "").strip())
        if employee is None:
            raise ValidationError("Please log in to submit a leave request.")

        kind = coerce_enum(LeaveType, leave_type, None)
        if kind is None:
            raise ValidationError("Please select a leave type.")
        if start_date is None or end_date is None:
            raise ValidationError("Please select both start and end dates.")
        require_order(start_date, end_date, "End date cannot be before start date.")

        location = optional_text(location)
        if kind == LeaveType.VACATION and not location:
            raise ValidationError("Please select a location for vacation leave.")

        num_days = inclusive_days(start_date, end_date)
        leave = LeaveRequest(
            id=0,
            leave_type=kind.value,
            start_date=start_date,
            end_date=end_date,
            num_days=float(num_days),
            personnel_id=employee.id,
            username=employee.username,
            employee_name=employee.full_name,
            location=location or employee.station or "",
            reason=optional_text(reason),
            date_of_filing=self._today(),
        )

        column = leave.balance_column
        balance = getattr(employee, column) if column else None
        if balance is not None and num_days > balance:
            raise ValidationError(
                f"Insufficient {kind.value.lower()} leave balance: {balance:g} day(s) remaining."
            )

        return self._leaves.create(leave)
