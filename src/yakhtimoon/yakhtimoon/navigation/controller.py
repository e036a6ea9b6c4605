from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from ..core.enums import Section
from ..core.exceptions import ValidationError
from ..common.logging import get_logger
from ..container import Container
from .sidebar import Sidebar

logger = get_logger(__name__)

# Sections whose create form lives in this application.
SECTION_FORMS = {
    Section.ATTENDANCE: "attendance_new",
    Section.EXAMS: "exams_new",
    Section.INSTRUCTORS: "instructors_new",
    Section.RECITATION: "recitation_new",
}


def register(app: Flask, container: Container) -> None:
    t = container.translator

    @app.context_processor
    def inject_shell():
        sidebar = Sidebar.from_session(session)
        return {
            "t": t,
            "direction": t.direction,
            "locale": t.locale,
            "sidebar": sidebar,
            "nav_items": sidebar.items(t),
        }

    @app.route("/", endpoint="dashboard")
    def dashboard():
        sidebar = Sidebar.from_session(session)
        form_endpoint = SECTION_FORMS.get(sidebar.active)
        courses = []
        if sidebar.active == Section.RECITATION:
            # Recitation forms are opened per course.
            courses = container.reference_loader.load("courses")["courses"]
        return render_template(
            "index.html",
            active_section=sidebar.active.value,
            form_url=url_for(form_endpoint) if form_endpoint and sidebar.active != Section.RECITATION else None,
            courses=courses,
        )

    @app.route("/navigate", methods=["POST"], endpoint="navigate")
    def navigate():
        sidebar = Sidebar.from_session(session)
        try:
            sidebar.select(request.form.get("section", ""), t)
            sidebar.save(session)
        except ValidationError as e:
            logger.info("Rejected navigation", extra={"section": request.form.get("section")})
            flash(str(e), "warning")
        return redirect(url_for("dashboard"))

    @app.route("/sidebar/toggle", methods=["POST"], endpoint="sidebar_toggle")
    def sidebar_toggle():
        sidebar = Sidebar.from_session(session)
        is_open = sidebar.toggle()
        sidebar.save(session)
        if request.is_json:
            return jsonify({"success": True, "is_open": is_open})
        return redirect(request.referrer or url_for("dashboard"))

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})
