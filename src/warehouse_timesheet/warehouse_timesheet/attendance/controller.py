from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_month, today
from ..common.responses import api_errors
from ..container import Container
from .input_collector import FormInputCollector
from .model import DayCell, Mark


def mark_json(mark: Mark) -> dict:
    return {
        "date": mark.work_date.strftime("%Y-%m-%d"),
        "state": mark.state.value,
        "worked": mark.worked,
        "extra": str(mark.extra),
        "hours": mark.hours,
    }


def cell_json(cell: DayCell) -> dict:
    return {
        "date": cell.work_date.strftime("%Y-%m-%d"),
        "day": cell.work_date.day,
        "state": cell.state.value,
        "title": cell.title,
        "worked": cell.worked,
        "extra": str(cell.extra),
        "hours": cell.hours,
    }


def register(app: Flask, container: Container) -> None:
    def _parse_employee_id(value):
        if value in (None, ""):
            return None
        return int(value)

    @app.route("/api/employees/<int:employee_id>/calendar", methods=["GET"], endpoint="employee_calendar")
    @api_errors("show the calendar")
    def employee_calendar(employee_id: int):
        month_s = request.args.get("month") or today().strftime("%Y-%m")
        year, month = parse_month(month_s)
        cells = container.attendance_service.month_view(employee_id, year, month)
        return jsonify({"employee_id": employee_id, "month": f"{year:04d}-{month:02d}", "days": [cell_json(c) for c in cells]})

    @app.route("/api/marks/advance", methods=["POST"], endpoint="marks_advance")
    @api_errors("update the timesheet")
    def marks_advance():
        data = request.get_json(silent=True) or request.form
        try:
            employee_id = _parse_employee_id(data.get("employee_id"))
        except (TypeError, ValueError):
            employee_id = None
        work_date = parse_iso_date(str(data.get("date") or ""))

        collector = FormInputCollector(data)
        outcome = container.attendance_service.advance_mark(employee_id, work_date, collector)
        payload = {"success": True, "applied": outcome.applied, "mark": mark_json(outcome.mark)}
        if not outcome.applied:
            payload["input_required"] = outcome.pending_input
        return jsonify(payload)
