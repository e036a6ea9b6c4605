from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..core.exceptions import ApiError, ApiValidationError, DomainError, ValidationError
from ..common.logging import get_logger
from ..common.validators import optional_int, parse_int
from ..container import Container
from ..forms.mode import FormMode, mode_from_record_id
from .form import RecitationForm, scope_to_course
from .model import COURSES_RESOURCE, LESSONS_RESOURCE, RECITATIONS_RESOURCE, STUDENTS_RESOURCE

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    t = container.translator

    def build_form(
        course_id: Optional[int],
        record: Optional[Mapping[str, Any]] = None,
        *,
        mode: Optional[FormMode] = None,
        student_id: Any = None,
    ) -> RecitationForm:
        lists = container.reference_loader.load(COURSES_RESOURCE, LESSONS_RESOURCE, STUDENTS_RESOURCE)
        if course_id is None:
            name, lessons, students = "", lists[LESSONS_RESOURCE], lists[STUDENTS_RESOURCE]
        else:
            name, lessons, students = scope_to_course(
                course_id,
                courses=lists[COURSES_RESOURCE],
                lessons=lists[LESSONS_RESOURCE],
                students=lists[STUDENTS_RESOURCE],
            )

        selected_student = None
        if student_id is None and record:
            student_id = record.get("student_id")
        if student_id is not None:
            wanted = parse_int(student_id, -1)
            selected_student = next((s for s in students if parse_int(s.get("id"), -1) == wanted), None)

        return RecitationForm(
            container.repository,
            t,
            record,
            course_lessons=lessons,
            course_students=students,
            selected_course_id=course_id,
            selected_course_name=name,
            selected_student=selected_student,
            mode=mode,
        )

    def render_form(form: RecitationForm, errors: Optional[Mapping[str, List[str]]] = None, status: int = 200):
        hidden: Dict[str, Any] = {}
        if form.selected_course_id is not None:
            hidden["course_id"] = form.selected_course_id
        if form.editing:
            hidden["student_id"] = form.state["student_id"]
        return (
            render_template(
                "form.html",
                form_title=form.title,
                form_subtitle=form.subtitle,
                sections=form.sections(errors),
                submit_label=form.submit_label,
                action_url=url_for("recitation_save"),
                record_id=form.mode.record_id,
                multipart=False,
                hidden=hidden,
                loading=form.state.loading,
            ),
            status,
        )

    @app.route("/recitation/new", endpoint="recitation_new")
    def recitation_new():
        return render_form(build_form(optional_int(request.args.get("course_id"))))

    @app.route("/recitation/<int:recitation_id>/edit", endpoint="recitation_edit")
    def recitation_edit(recitation_id: int):
        try:
            record = container.repository.get(RECITATIONS_RESOURCE, recitation_id)
        except ApiError:
            logger.exception(
                "Failed to load recitation", extra={"resource": RECITATIONS_RESOURCE, "record_id": recitation_id}
            )
            flash(t("common.loadFailed"), "danger")
            return redirect(url_for("dashboard"))

        course_id = optional_int(request.args.get("course_id"))
        if course_id is None:
            course_id = optional_int(record.get("course_id"))
        return render_form(build_form(course_id, record))

    @app.route("/recitation/save", methods=["POST"], endpoint="recitation_save")
    def recitation_save():
        form = build_form(
            optional_int(request.form.get("course_id")),
            mode=mode_from_record_id(request.form.get("record_id")),
            student_id=request.form.get("student_id"),
        )
        form.state.bind(request.form)
        try:
            form.submit()
        except ApiValidationError as e:
            flash(t("common.fixErrors"), "warning")
            return render_form(form, e.errors, 422)
        except ValidationError as e:
            flash(str(e), "warning")
            return render_form(form, status=400)
        except DomainError:
            logger.exception("Failed to save recitation", extra={"resource": RECITATIONS_RESOURCE})
            flash(t("common.systemError"), "danger")
            return render_form(form, status=502)

        flash(t("recitation.saved"), "success")
        return redirect(url_for("dashboard"))
