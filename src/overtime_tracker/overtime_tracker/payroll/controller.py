from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.web import admin_required, login_required, parse_int_arg, to_json
from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..container import Container
from .aggregator import build_department_summary
from .export import CSV_MIMETYPE, XLSX_MIMETYPE, report_filename, report_to_csv_bytes, report_to_excel_bytes


def register(app: Flask, container: Container) -> None:
    def _year_month() -> tuple[int, int]:
        today = now_local().date()
        year = parse_int_arg(request.args.get("year", today.year), "year")
        month = parse_int_arg(request.args.get("month", today.month), "month")
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        return year, month

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="reports_monthly")
    @admin_required
    def reports_monthly():
        year, month = _year_month()
        report = container.report_service.monthly_report(year, month)
        return jsonify({"year": year, "month": month, "rows": to_json(report)})

    @app.route("/api/reports/departments", methods=["GET"], endpoint="reports_departments")
    @admin_required
    def reports_departments():
        year, month = _year_month()
        summary = container.report_service.department_summary(year, month)
        return jsonify({"year": year, "month": month, "departments": to_json(summary)})

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="reports_monthly_csv")
    @admin_required
    def reports_monthly_csv():
        year, month = _year_month()
        report = container.report_service.monthly_report(year, month)
        return app.response_class(
            report_to_csv_bytes(report),
            mimetype=CSV_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={report_filename(year, month)}"},
        )

    @app.route("/api/reports/monthly.xlsx", methods=["GET"], endpoint="reports_monthly_xlsx")
    @admin_required
    def reports_monthly_xlsx():
        year, month = _year_month()
        report = container.report_service.monthly_report(year, month)
        departments = build_department_summary(report)
        return send_file(
            io.BytesIO(report_to_excel_bytes(report, departments)),
            download_name=report_filename(year, month, extension="xlsx"),
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        return jsonify(to_json(container.report_service.dashboard_stats()))
