from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("home"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(username, password)

                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=7)

                session["user_id"] = s_user.user_id
                session["username"] = s_user.username
                session["name"] = s_user.full_name

                flash("Signed in successfully!", "success")
                return redirect(url_for("home"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Login failed")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error while signing in: {e}", "danger")
                else:
                    flash("System error while signing in", "danger")

        return render_template("login.html")

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_account():
        if "user_id" in session:
            return redirect(url_for("home"))

        if request.method == "POST":
            try:
                container.user_service.register(
                    username=request.form.get("username", ""),
                    full_name=request.form.get("full_name", ""),
                    password=request.form.get("password", ""),
                )
                flash("Account created, please sign in.", "success")
                return redirect(url_for("login"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Sign up failed")
                flash("System error while creating the account", "danger")

        return render_template("register.html", form=request.form)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("home"))
