from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, session

from ..core.constants import NO_WEEKLY_DATA_MESSAGE
from ..core.exceptions import AuthenticationError, DataFetchError
from ..container import Container

logger = logging.getLogger(__name__)

CSV_FIELDS = ["subject", "type", "present", "absent", "totalLectures", "attendanceScore", "lecturesNeededFor75"]


def register(app: Flask, container: Container) -> None:
    def _current_user_id() -> int:
        user_id = session.get("user_id")
        if not user_id:
            raise AuthenticationError("Unauthorized")
        return int(user_id)

    def _write_report_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/generate-weekly-report", methods=["GET"], endpoint="api_weekly_report")
    def api_weekly_report():
        try:
            user_id = _current_user_id()
        except AuthenticationError:
            return app.response_class("Unauthorized", status=401)

        try:
            report = container.report_service.weekly_report(user_id)
        except DataFetchError as e:
            return jsonify({"error": str(e)}), 500
        except Exception as e:
            logger.exception("API Error")
            return jsonify({"error": str(e)}), 500

        if report is None:
            return jsonify({"message": NO_WEEKLY_DATA_MESSAGE}), 200
        return jsonify(report.to_json()), 200

    @app.route("/api/generate-weekly-report.csv", methods=["GET"], endpoint="api_weekly_report_csv")
    def api_weekly_report_csv():
        try:
            user_id = _current_user_id()
        except AuthenticationError:
            return app.response_class("Unauthorized", status=401)

        try:
            report = container.report_service.weekly_report(user_id)
        except DataFetchError as e:
            return jsonify({"error": str(e)}), 500
        except Exception as e:
            logger.exception("API Error")
            return jsonify({"error": str(e)}), 500

        rows = report.to_json() if report else []
        filename = "weekly_attendance.csv"
        if report:
            filename = f"weekly_attendance_{report.since.strftime('%Y%m%d')}_{report.until.strftime('%Y%m%d')}.csv"
        return _write_report_csv(rows=rows, filename=filename)
