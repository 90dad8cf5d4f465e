from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Decision state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveType(str, Enum):
    VACATION = "Vacation"
    SICK = "Sick"
    EMERGENCY = "Emergency"
    MATERNITY = "Maternity"
    PATERNITY = "Paternity"


class ClearanceStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    REJECTED = "Rejected"


class ClearanceType(str, Enum):
    RESIGNATION = "Resignation"
    RETIREMENT = "Retirement"
    EQUIPMENT_COMPLETION = "Equipment Completion"
    TRANSFER = "Transfer"


class InspectionStatus(str, Enum):
    PASSED = "Passed"
    FAILED = "Failed"
    NEEDS_ATTENTION = "Needs Attention"


class InventoryStatus(str, Enum):
    OPERATIONAL = "Operational"
    MAINTENANCE = "Maintenance"
    DAMAGED = "Damaged"


class TrainingStatus(str, Enum):
    PENDING = "Pending"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class RecruitmentStage(str, Enum):
    APPLIED = "Applied"
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    FINAL_REVIEW = "Final Review"


class RecruitmentStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PersonnelStatus(str, Enum):
    """Employment state; anything but ACTIVE shows up on the history screen."""

    ACTIVE = "Active"
    RETIRED = "Retired"
    RESIGNED = "Resigned"
    EQUIPMENT_COMPLETED = "Equipment Completed"


class AwardType(str, Enum):
    MEDAL = "Medal"
    COMMENDATION = "Commendation"
    CERTIFICATE = "Certificate"
    RIBBON = "Ribbon"
    BADGE = "Badge"
    GENERAL = "General"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def coerce_enum(enum_cls, value, default):
    """Map a stored value onto ``enum_cls`` case-insensitively, else ``default``."""
    if isinstance(value, enum_cls):
        return value
    text = str(value or "").strip().lower()
    for member in enum_cls:
        if member.value.lower() == text:
            return member
    return default
