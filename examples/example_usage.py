"""Example: use the service layer directly (without Flask).

Prints this month's payroll report for every employee in the database.
"""

import importlib

from config import get_settings_module

from src.warehouse_timesheet.warehouse_timesheet.common.datetime_utils import today
from src.warehouse_timesheet.warehouse_timesheet.container import build_container
from src.warehouse_timesheet.warehouse_timesheet.payroll.model import Period


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, default_shift_hours=settings.DEFAULT_SHIFT_HOURS)

    now = today()
    service = container.payroll_report_service
    print(service.render_report(service.build_report(Period.for_month(now.year, now.month))))


if __name__ == "__main__":
    main()
