from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.web import current_user, login_required, parse_bool, parse_date_arg, parse_int_arg, to_json
from ..core.enums import ImportRowStatus
from ..core.exceptions import ValidationError
from ..container import Container
from ..payroll.export import XLSX_MIMETYPE
from .model import ImportRow


def row_from_json(data: dict) -> ImportRow:
    work_date = data.get("work_date")
    employee_id = data.get("employee_id")
    try:
        return ImportRow(
            end_time=str(data.get("end_time") or ""),
            work_date=parse_date_arg(work_date, "work_date") if work_date else None,
            overtime_hours=float(data.get("overtime_hours") or 0),
            is_holiday=bool(parse_bool(data.get("is_holiday"))),
            employee_id=int(employee_id) if employee_id else None,
            status=ImportRowStatus(data.get("status") or ImportRowStatus.PENDING.value),
            error=data.get("error"),
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid import row: {e}") from e


def register(app: Flask, container: Container) -> None:
    def _rows_payload() -> list[ImportRow]:
        data = request.get_json(silent=True) or {}
        return [row_from_json(r) for r in data.get("rows") or []]

    @app.route("/api/import/preview", methods=["POST"], endpoint="import_preview")
    @login_required
    def import_preview():
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("No file uploaded")
        work_date_raw = request.form.get("work_date")
        work_date = parse_date_arg(work_date_raw, "work_date") if work_date_raw else None

        preview = container.import_service.preview_file(upload.stream, upload.filename, work_date=work_date)
        return jsonify(
            {
                "rows": to_json(preview.rows),
                "total_rows": preview.total_rows,
                "skipped_unparseable": preview.skipped_unparseable,
                "skipped_before_threshold": preview.skipped_before_threshold,
            }
        )

    @app.route("/api/import/toggle-holiday", methods=["POST"], endpoint="import_toggle_holiday")
    @login_required
    def import_toggle_holiday():
        data = request.get_json(silent=True) or {}
        row = container.import_service.toggle_holiday(row_from_json(data.get("row") or {}))
        return jsonify({"row": to_json(row)})

    @app.route("/api/import/assign-employee", methods=["POST"], endpoint="import_assign_employee")
    @login_required
    def import_assign_employee():
        data = request.get_json(silent=True) or {}
        rows = container.import_service.assign_employee(
            _rows_payload(),
            parse_int_arg(data.get("index", 0), "index"),
            parse_int_arg(data.get("employee_id"), "employee_id"),
        )
        return jsonify({"rows": to_json(rows)})

    @app.route("/api/import/commit", methods=["POST"], endpoint="import_commit")
    @login_required
    def import_commit():
        result = container.import_service.commit(_rows_payload(), current_user=current_user())
        return jsonify(to_json(result))

    @app.route("/api/import/template", methods=["GET"], endpoint="import_template")
    @login_required
    def import_template():
        return send_file(
            io.BytesIO(container.import_service.template_workbook()),
            download_name="overtime_template.xlsx",
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
