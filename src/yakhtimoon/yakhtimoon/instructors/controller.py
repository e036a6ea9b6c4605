from __future__ import annotations

from typing import List, Mapping, Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..core.exceptions import ApiError, ApiValidationError, DomainError, ValidationError
from ..common.logging import get_logger
from ..container import Container
from ..forms.mode import mode_from_record_id
from .form import InstructorForm
from .model import INSTRUCTORS_RESOURCE

logger = get_logger(__name__)

TOGGLE_ACTIONS = {
    "toggle_password": InstructorForm.toggle_password_visibility,
    "toggle_confirmation": InstructorForm.toggle_confirmation_visibility,
}


def register(app: Flask, container: Container) -> None:
    t = container.translator

    def render_form(form: InstructorForm, errors: Optional[Mapping[str, List[str]]] = None, status: int = 200):
        return (
            render_template(
                "form.html",
                form_title=form.title,
                form_subtitle=form.subtitle,
                sections=form.sections(errors),
                submit_label=form.submit_label,
                action_url=url_for("instructors_save"),
                record_id=form.mode.record_id,
                multipart=True,
                hidden={
                    "show_password": int(form.show_password),
                    "show_confirm_password": int(form.show_confirm_password),
                },
                loading=form.state.loading,
            ),
            status,
        )

    @app.route("/instructors/new", endpoint="instructors_new")
    def instructors_new():
        return render_form(InstructorForm(container.repository, t))

    @app.route("/instructors/<int:instructor_id>/edit", endpoint="instructors_edit")
    def instructors_edit(instructor_id: int):
        try:
            record = container.repository.get(INSTRUCTORS_RESOURCE, instructor_id)
        except ApiError:
            logger.exception(
                "Failed to load instructor", extra={"resource": INSTRUCTORS_RESOURCE, "record_id": instructor_id}
            )
            flash(t("common.loadFailed"), "danger")
            return redirect(url_for("dashboard"))
        return render_form(InstructorForm(container.repository, t, record))

    @app.route("/instructors/save", methods=["POST"], endpoint="instructors_save")
    def instructors_save():
        form = InstructorForm(container.repository, t, mode=mode_from_record_id(request.form.get("record_id")))
        form.state.bind(request.form)
        form.show_password = request.form.get("show_password") == "1"
        form.show_confirm_password = request.form.get("show_confirm_password") == "1"

        toggle = TOGGLE_ACTIONS.get(request.form.get("action", ""))
        if toggle is not None:
            toggle(form)
            return render_form(form)

        form.choose_image(request.files.get("instructor_img"))
        try:
            form.submit()
        except ApiValidationError as e:
            flash(t("common.fixErrors"), "warning")
            return render_form(form, e.errors, 422)
        except ValidationError as e:
            flash(str(e), "warning")
            return render_form(form, status=400)
        except DomainError:
            logger.exception("Failed to save instructor", extra={"resource": INSTRUCTORS_RESOURCE})
            flash(t("common.systemError"), "danger")
            return render_form(form, status=502)

        flash(t("instructors.saved"), "success")
        return redirect(url_for("dashboard"))
