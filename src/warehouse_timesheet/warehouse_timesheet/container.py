from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.state_machine import AttendanceStateMachine
from .common.shift_hours import ShiftHoursSetting
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_timesheet_repository import MySQLTimesheetRepository
from .employees.repository import TimesheetRepository
from .employees.roster import Roster
from .employees.service import EmployeeService
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    repository: TimesheetRepository
    roster: Roster
    shift_hours: ShiftHoursSetting

    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService


def build_services(repository: TimesheetRepository, *, default_shift_hours: float) -> Container:
    roster = Roster(repository.load_all())
    shift_hours = ShiftHoursSetting(float(default_shift_hours))

    return Container(
        repository=repository,
        roster=roster,
        shift_hours=shift_hours,
        employee_service=EmployeeService(roster, repository),
        attendance_service=AttendanceService(
            roster,
            repository,
            state_machine=AttendanceStateMachine(),
            shift_hours=shift_hours,
        ),
        payroll_report_service=PayrollReportService(roster, shift_hours=shift_hours),
    )


def build_container(*, db_config: dict, default_shift_hours: float) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(MySQLTimesheetRepository(conn), default_shift_hours=default_shift_hours)
