from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from ..core.constants import PROMPT_POLL_SECONDS
from ..core.exceptions import DataFetchError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                flash("Please sign in to continue.", "warning")
                return redirect(url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    @app.route("/", endpoint="home")
    def home():
        if "user_id" not in session:
            return render_template("home.html", signed_in=False)

        user_id = int(session["user_id"])
        view = None
        error = None
        try:
            view = container.attendance_service.home_view(user_id)
        except DataFetchError as e:
            error = str(e) or "Failed to fetch data."

        active = None
        if view is not None:
            try:
                active = container.attendance_service.active_lecture(user_id)
            except DataFetchError as e:
                error = str(e) or "Failed to check the lecture in progress."

        return render_template(
            "home.html",
            signed_in=True,
            name=session.get("name"),
            lectures=view.lectures if view else [],
            alerts=view.alerts if view else [],
            error=error,
            active=active if active and active.recorded_status is None else None,
            poll_seconds=PROMPT_POLL_SECONDS,
        )

    @app.route("/attendance", methods=["POST"], endpoint="record_attendance")
    @login_required
    def record_attendance():
        status = request.form.get("status", "")
        try:
            lecture_id = int(request.form.get("lecture_id") or 0)
            container.attendance_service.record(int(session["user_id"]), lecture_id, status)
            lecture = container.lectures_repo.get_by_id(lecture_id)
            subject = lecture.subject if lecture else ""
            flash(f"Attendance recorded as {status} for {subject}", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except ValueError:
            flash("Lecture not found", "warning")
        except Exception as e:
            logger.exception("Error recording attendance")
            flash(str(e) or "Failed to record attendance.", "danger")
        return redirect(url_for("home"))

    @app.route("/api/active-lecture", methods=["GET"], endpoint="api_active_lecture")
    def api_active_lecture():
        if "user_id" not in session:
            return app.response_class("Unauthorized", status=401)

        try:
            active = container.attendance_service.active_lecture(int(session["user_id"]))
        except DataFetchError as e:
            return jsonify({"error": str(e)}), 500
        except Exception as e:
            logger.exception("Error checking active lecture")
            return jsonify({"error": str(e)}), 500

        if active is None:
            return jsonify({"lecture": None, "recorded": None})
        return jsonify(
            {
                "lecture": active.lecture.to_dict(),
                "recorded": active.recorded_status.value if active.recorded_status else None,
            }
        )
