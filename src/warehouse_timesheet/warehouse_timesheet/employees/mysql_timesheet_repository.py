from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List

import mysql.connector

from ..attendance.model import Mark
from ..core.enums import MarkState
from ..core.exceptions import StorageError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_decimal
from .model import Employee
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_all(self) -> List[Employee]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT employee_id, name, warehouse, shift_name, daily_rate, hourly_rate, uses_hourly_rate
                    FROM employees
                    ORDER BY name
                    """
                )
                employees = [self._row_to_employee(r) for r in fetchall(cur)]
                by_id: Dict[int, Employee] = {int(e.employee_id): e for e in employees}

                cur.execute(
                    """
                    SELECT employee_id, mark_date, state, is_worked, extra_amount, worked_hours
                    FROM day_marks
                    """
                )
                for r in fetchall(cur):
                    employee = by_id.get(int(r["employee_id"]))
                    if employee is None:
                        continue
                    mark = self._row_to_mark(r)
                    employee.marks[mark.work_date] = mark
                return employees
        except mysql.connector.Error as e:
            raise StorageError("Failed to load employees") from e

    def save_employee(self, employee: Employee) -> int:
        params = (
            employee.name,
            employee.warehouse,
            employee.shift_name,
            employee.daily_rate,
            employee.hourly_rate,
            1 if employee.uses_hourly_rate else 0,
        )
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if employee.employee_id is None:
                    cur.execute(
                        """
                        INSERT INTO employees(name, warehouse, shift_name, daily_rate, hourly_rate, uses_hourly_rate)
                        VALUES(%s,%s,%s,%s,%s,%s)
                        """,
                        params,
                    )
                    return int(cur.lastrowid)

                cur.execute(
                    """
                    UPDATE employees
                    SET name=%s, warehouse=%s, shift_name=%s, daily_rate=%s, hourly_rate=%s, uses_hourly_rate=%s
                    WHERE employee_id=%s
                    """,
                    params + (int(employee.employee_id),),
                )
                return int(employee.employee_id)
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to save employee {employee.name!r}") from e

    def delete_employee(self, employee_id: int) -> None:
        # Marks and employee row share one transaction.
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM day_marks WHERE employee_id=%s", (int(employee_id),))
                cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to delete employee {employee_id}") from e

    def save_mark(self, employee_id: int, mark: Mark) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO day_marks(employee_id, mark_date, state, is_worked, extra_amount, worked_hours)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE
                        state=VALUES(state),
                        is_worked=VALUES(is_worked),
                        extra_amount=VALUES(extra_amount),
                        worked_hours=VALUES(worked_hours)
                    """,
                    (
                        int(employee_id),
                        mark.work_date,
                        mark.state.value,
                        1 if mark.worked else 0,
                        mark.extra,
                        mark.hours,
                    ),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to save mark {mark.work_date} of employee {employee_id}") from e

    def delete_mark(self, employee_id: int, work_date: date) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "DELETE FROM day_marks WHERE employee_id=%s AND mark_date=%s",
                    (int(employee_id), work_date),
                )
        except mysql.connector.Error as e:
            raise StorageError(f"Failed to delete mark {work_date} of employee {employee_id}") from e

    @staticmethod
    def _row_to_employee(r: dict) -> Employee:
        try:
            return Employee(
                employee_id=int(r["employee_id"]),
                name=r["name"],
                warehouse=r["warehouse"],
                shift_name=r["shift_name"],
                daily_rate=normalize_mysql_decimal(r["daily_rate"]),
                hourly_rate=normalize_mysql_decimal(r["hourly_rate"]),
                uses_hourly_rate=bool(r.get("uses_hourly_rate")),
            )
        except (ValueError, TypeError, ValidationError) as e:
            raise StorageError(f"Invalid stored employee {r.get('employee_id')}: {e}") from e

    @staticmethod
    def _row_to_mark(r: dict) -> Mark:
        hours = r.get("worked_hours")
        try:
            return Mark(
                work_date=normalize_mysql_date(r["mark_date"]),
                state=MarkState(r["state"]),
                worked=bool(r["is_worked"]),
                extra=normalize_mysql_decimal(r["extra_amount"]),
                hours=float(hours) if hours is not None else None,
            )
        except (ValueError, TypeError) as e:
            raise StorageError(
                f"Invalid stored mark {r.get('mark_date')} of employee {r.get('employee_id')}: {e}"
            ) from e
