from __future__ import annotations

from typing import List, Mapping, Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..core.exceptions import ApiError, ApiValidationError, DomainError, ValidationError
from ..common.logging import get_logger
from ..container import Container
from ..forms.mode import mode_from_record_id
from .form import ExamForm
from .model import EXAMS_RESOURCE

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    t = container.translator

    def render_form(form: ExamForm, errors: Optional[Mapping[str, List[str]]] = None, status: int = 200):
        form.load_reference_data()
        return (
            render_template(
                "form.html",
                form_title=form.title,
                form_subtitle=None,
                sections=[(None, form.fields(errors))],
                submit_label=form.submit_label,
                action_url=url_for("exams_save"),
                record_id=form.mode.record_id,
                multipart=False,
                loading=form.state.loading,
            ),
            status,
        )

    @app.route("/exams/new", endpoint="exams_new")
    def exams_new():
        return render_form(ExamForm(container.repository, t, loader=container.reference_loader))

    @app.route("/exams/<int:exam_id>/edit", endpoint="exams_edit")
    def exams_edit(exam_id: int):
        try:
            record = container.repository.get(EXAMS_RESOURCE, exam_id)
        except ApiError:
            logger.exception("Failed to load exam", extra={"resource": EXAMS_RESOURCE, "record_id": exam_id})
            flash(t("common.loadFailed"), "danger")
            return redirect(url_for("dashboard"))
        return render_form(ExamForm(container.repository, t, record, loader=container.reference_loader))

    @app.route("/exams/save", methods=["POST"], endpoint="exams_save")
    def exams_save():
        form = ExamForm(
            container.repository,
            t,
            mode=mode_from_record_id(request.form.get("record_id")),
            loader=container.reference_loader,
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
            logger.exception("Failed to save exam", extra={"resource": EXAMS_RESOURCE})
            flash(t("common.systemError"), "danger")
            return render_form(form, status=502)

        flash(t("exams.saved"), "success")
        return redirect(url_for("dashboard"))
