from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, render_template, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_csv_list
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import ReportData, ReportFilters

CSV_HEADERS = ["Student", "Grupa", "Data", "Status", "Notatki"]


def parse_report_filters(args) -> ReportFilters:
    status_s = (args.get("status") or "").strip().lower()
    status = None
    if status_s and status_s != "all":
        if status_s not in {AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value, AttendanceStatus.EXCUSED.value}:
            raise ValidationError(f"Invalid status filter: {status_s}")
        status = AttendanceStatus(status_s)

    date_from = args.get("dateFrom")
    date_to = args.get("dateTo")
    return ReportFilters(
        group_ids=parse_csv_list(args.get("groupIds")),
        student_ids=parse_csv_list(args.get("studentIds")),
        date_from=parse_iso_date(date_from) if date_from else None,
        date_to=parse_iso_date(date_to) if date_to else None,
        status=status,
    )


def report_csv(report: ReportData) -> str:
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for item in report.items:
        writer.writerow([item["student_name"], item["group_name"], item["date"], item["status"], item["notes"]])
    return out.getvalue()


def register(app: Flask, container: Container) -> None:
    def _build() -> tuple[ReportFilters, ReportData]:
        filters = parse_report_filters(request.args)
        return filters, container.report_service.build_attendance_report(filters)

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="api_report_attendance")
    def api_report_attendance():
        _, report = _build()
        return jsonify(report.to_dict())

    @app.route("/api/export/csv", methods=["GET"], endpoint="api_export_csv")
    def api_export_csv():
        _, report = _build()

        # BOM so Excel opens the file as UTF-8.
        csv_bytes = report_csv(report).encode("utf-8-sig")
        filename = f"raport-obecnosci-{date.today().isoformat()}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.route("/api/export/html", methods=["GET"], endpoint="api_export_html")
    def api_export_html():
        filters, report = _build()
        html = render_template(
            "reports/attendance_report.html",
            report=report,
            filters=filters,
            generated_on=date.today().isoformat(),
        )
        filename = f"raport-obecnosci-{date.today().isoformat()}.html"
        return app.response_class(
            html,
            mimetype="text/html",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
