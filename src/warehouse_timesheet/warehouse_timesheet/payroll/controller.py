from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import add_months, parse_iso_date, parse_month, today
from ..common.formatting import format_number
from ..common.responses import api_errors
from ..container import Container
from .model import Period, SalaryResult


def result_json(r: SalaryResult) -> dict:
    return {
        "shifts_worked": r.shifts_worked,
        "total_hours": float(r.total_hours),
        "base_amount": str(r.base_amount),
        "extras_amount": str(r.extras_amount),
        "grand_total": str(r.grand_total),
    }


def register(app: Flask, container: Container) -> None:
    def _period_from_args() -> Period:
        start_s = request.args.get("from")
        end_s = request.args.get("to")
        if start_s or end_s:
            end = parse_iso_date(end_s) if end_s else today()
            start = parse_iso_date(start_s) if start_s else add_months(today(), -1)
            return Period(start=start, end=end)

        year, month = parse_month(request.args.get("month") or today().strftime("%Y-%m"))
        return Period.for_month(year, month)

    @app.route("/api/employees/<int:employee_id>/salary", methods=["GET"], endpoint="employee_salary")
    @api_errors("calculate the salary")
    def employee_salary(employee_id: int):
        period = _period_from_args()
        summary = container.payroll_report_service.salary_summary(employee_id, period)
        return jsonify(
            {
                "employee_id": employee_id,
                "from": period.start.strftime("%Y-%m-%d"),
                "to": period.end.strftime("%Y-%m-%d"),
                "headline": summary.headline,
                "details": summary.details,
                "result": result_json(summary.result),
            }
        )

    @app.route("/report", methods=["GET"], endpoint="report")
    @api_errors("build the report")
    def report():
        period = _period_from_args()
        data = container.payroll_report_service.build_report(period)
        text = container.payroll_report_service.render_report(data)
        return app.response_class(text, mimetype="text/plain")

    @app.route("/api/settings/shift-hours", methods=["GET", "PUT"], endpoint="settings_shift_hours")
    @api_errors("change the shift hours")
    def settings_shift_hours():
        if request.method == "PUT":
            data = request.get_json(silent=True) or request.form
            container.payroll_report_service.set_default_shift_hours(data.get("hours"))
        hours = container.payroll_report_service.default_shift_hours
        return jsonify({"hours": hours, "label": format_number(hours)})
