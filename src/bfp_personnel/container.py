from __future__ import annotations

from dataclasses import dataclass

from .awards.mysql_award_repository import MySQLAwardRepository
from .awards.service import AwardService
from .clearance.mysql_clearance_repository import MySQLClearanceRepository
from .clearance.service import ClearanceService
from .database.connection import DBConfig, DatabaseConnection
from .database.local_store import LocalJsonStore
from .inspections.mysql_inspection_repository import MySQLInspectionRepository
from .inspections.service import InspectionService
from .inventory.mysql_inventory_repository import MySQLInventoryRepository
from .inventory.service import InventoryService
from .leave.local_leave_repository import LocalLeaveRecordRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.service import LeaveService
from .personnel.local_roster_repository import LocalRosterRepository
from .personnel.mysql_personnel_repository import MySQLPersonnelRepository
from .personnel.service import PersonnelService, RosterService
from .recruitment.mysql_recruitment_repository import MySQLRecruitmentRepository
from .recruitment.service import RecruitmentService
from .training.mysql_training_repository import MySQLTrainingRepository
from .training.service import TrainingService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    local_store: LocalJsonStore

    personnel_repo: MySQLPersonnelRepository
    roster_repo: LocalRosterRepository
    leave_repo: MySQLLeaveRepository
    leave_records_repo: LocalLeaveRecordRepository
    clearance_repo: MySQLClearanceRepository
    award_repo: MySQLAwardRepository
    inventory_repo: MySQLInventoryRepository
    inspection_repo: MySQLInspectionRepository
    training_repo: MySQLTrainingRepository
    recruitment_repo: MySQLRecruitmentRepository

    personnel_service: PersonnelService
    roster_service: RosterService
    leave_service: LeaveService
    clearance_service: ClearanceService
    award_service: AwardService
    inventory_service: InventoryService
    inspection_service: InspectionService
    training_service: TrainingService
    recruitment_service: RecruitmentService


def build_container(*, db_config: dict, local_store_path: str) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)
    local_store = LocalJsonStore(local_store_path)

    personnel_repo = MySQLPersonnelRepository(conn)
    roster_repo = LocalRosterRepository(local_store)
    leave_repo = MySQLLeaveRepository(conn)
    leave_records_repo = LocalLeaveRecordRepository(local_store)
    clearance_repo = MySQLClearanceRepository(conn)
    award_repo = MySQLAwardRepository(conn)
    inventory_repo = MySQLInventoryRepository(conn)
    inspection_repo = MySQLInspectionRepository(conn)
    training_repo = MySQLTrainingRepository(conn)
    recruitment_repo = MySQLRecruitmentRepository(conn)

    return Container(
        conn=conn,
        local_store=local_store,
        personnel_repo=personnel_repo,
        roster_repo=roster_repo,
        leave_repo=leave_repo,
        leave_records_repo=leave_records_repo,
        clearance_repo=clearance_repo,
        award_repo=award_repo,
        inventory_repo=inventory_repo,
        inspection_repo=inspection_repo,
        training_repo=training_repo,
        recruitment_repo=recruitment_repo,
        personnel_service=PersonnelService(personnel_repo),
        roster_service=RosterService(roster_repo, personnel_repo),
        leave_service=LeaveService(leave_repo, personnel_repo, leave_records_repo),
        clearance_service=ClearanceService(clearance_repo, personnel_repo),
        award_service=AwardService(award_repo, personnel_repo),
        inventory_service=InventoryService(inventory_repo),
        inspection_service=InspectionService(inspection_repo, inventory_repo, personnel_repo),
        training_service=TrainingService(training_repo, personnel_repo),
        recruitment_service=RecruitmentService(recruitment_repo),
    )
