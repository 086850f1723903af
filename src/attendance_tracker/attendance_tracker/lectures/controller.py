from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.constants import DAY_CHOICES, DAY_NAMES
from ..core.enums import LectureType
from ..core.exceptions import ValidationError
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

    @app.route("/schedule", methods=["GET", "POST"], endpoint="schedule")
    @login_required
    def schedule():
        error = None
        if request.method == "POST":
            try:
                container.lecture_service.schedule(
                    user_id=int(session["user_id"]),
                    subject=request.form.get("subject", ""),
                    type=request.form.get("type", ""),
                    day_of_week=request.form.get("day_of_week", ""),
                    start_time=request.form.get("start_time", ""),
                    end_time=request.form.get("end_time", ""),
                )
                flash("Lecture scheduled successfully!", "success")
                return redirect(url_for("home"))
            except ValidationError as e:
                error = str(e)
            except Exception as e:
                logger.exception("Error adding lecture")
                error = str(e) or "Failed to add lecture."

        return render_template(
            "schedule.html",
            form=request.form,
            error=error,
            lecture_types=[t.value for t in LectureType],
            days=[(d, DAY_NAMES[d]) for d in DAY_CHOICES],
        ), (400 if error else 200)
