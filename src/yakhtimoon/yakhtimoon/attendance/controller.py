from __future__ import annotations

import io
import json
from typing import Any, List, Mapping, Optional

from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, url_for

from ..core.exceptions import ApiError, ApiValidationError, DomainError, ValidationError
from ..core.enums import ScanState
from ..common.logging import get_logger
from ..container import Container
from ..forms.mode import mode_from_record_id
from .form import AttendanceForm
from .model import ATTENDANCE_RESOURCE
from .qr import decode_data_url, decode_image, encode_qr_payload, render_qr_png

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    t = container.translator

    def new_form(record: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> AttendanceForm:
        return AttendanceForm(container.repository, t, record, loader=container.reference_loader, **kwargs)

    def render_form(form: AttendanceForm, errors: Optional[Mapping[str, List[str]]] = None, status: int = 200):
        form.load_reference_data()
        return (
            render_template(
                "attendance/form.html",
                form=form,
                form_title=form.title,
                form_subtitle=form.subtitle,
                sections=[(None, form.fields(errors))],
                submit_label=form.submit_label,
                action_url=url_for("attendance_save"),
                record_id=form.mode.record_id,
                multipart=False,
                client_state=form.to_client(),
                scan_delay_ms=container.qr_scan_delay_ms,
                loading=form.state.loading,
            ),
            status,
        )

    def restore_from_client(payload: Mapping[str, Any]) -> AttendanceForm:
        """Rebuild the working copy the page holds; endpoints keep no server-side state."""
        form = new_form()
        state = payload.get("state")
        try:
            if isinstance(state, str):
                state = json.loads(state or "{}")
            form.restore(state or {}, payload.get("scan_state") or ScanState.IDLE.value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(t("common.systemError")) from exc
        return form

    def client_error(message: str, form: Optional[AttendanceForm] = None):
        body = {"success": False, "message": message}
        if form is not None:
            body.update(form.to_client())
        return jsonify(body), 400

    @app.route("/attendance/new", endpoint="attendance_new")
    def attendance_new():
        return render_form(new_form())

    @app.route("/attendance/<int:attendance_id>/edit", endpoint="attendance_edit")
    def attendance_edit(attendance_id: int):
        try:
            record = container.repository.get(ATTENDANCE_RESOURCE, attendance_id)
        except ApiError:
            logger.exception(
                "Failed to load attendance", extra={"resource": ATTENDANCE_RESOURCE, "record_id": attendance_id}
            )
            flash(t("common.loadFailed"), "danger")
            return redirect(url_for("dashboard"))
        return render_form(new_form(record))

    @app.route("/attendance/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        form = new_form(mode=mode_from_record_id(request.form.get("record_id")))
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
            logger.exception("Failed to save attendance", extra={"resource": ATTENDANCE_RESOURCE})
            flash(t("common.systemError"), "danger")
            return render_form(form, status=502)

        flash(t("attendance.saved"), "success")
        return redirect(url_for("dashboard"))

    @app.route("/api/attendance/qr/toggle", methods=["POST"], endpoint="api_attendance_qr_toggle")
    def api_attendance_qr_toggle():
        try:
            form = restore_from_client(request.get_json(silent=True) or {})
        except ValidationError as e:
            return client_error(str(e))
        form.toggle_scanner()
        return jsonify({"success": True, **form.to_client()})

    @app.route("/api/attendance/qr/scan", methods=["POST"], endpoint="api_attendance_qr_scan")
    def api_attendance_qr_scan():
        """One decode attempt: either the raw QR text or a camera frame as a data URL."""
        payload = request.get_json(silent=True) or {}
        try:
            form = restore_from_client(payload)
        except ValidationError as e:
            return client_error(str(e))

        data = payload.get("data")
        if not data and payload.get("frame"):
            data = decode_data_url(str(payload["frame"]))

        try:
            resolved = form.receive_scan(str(data).strip() if data else None)
        except ValidationError as e:
            return client_error(str(e), form)
        return jsonify({"success": True, "resolved": resolved, **form.to_client()})

    @app.route("/api/attendance/qr/image", methods=["POST"], endpoint="api_attendance_qr_image")
    def api_attendance_qr_image():
        """Decode an uploaded snapshot of a student card."""
        try:
            form = restore_from_client(request.form)
        except ValidationError as e:
            return client_error(str(e))

        file = request.files.get("image")
        data = decode_image(file.stream) if file is not None else None
        if not data:
            return client_error(t("attendance.noQrDetected"), form)

        # Uploading a snapshot is an explicit scan, whatever the camera state;
        # a rejected card leaves the scanner as the page had it.
        previous = form.scan_state
        if not form.scanning:
            form.toggle_scanner()
        try:
            resolved = form.receive_scan(data)
        except ValidationError as e:
            form.scan_state = previous
            return client_error(str(e), form)
        return jsonify({"success": True, "resolved": resolved, **form.to_client()})

    @app.route("/api/attendance/qr/manual", methods=["POST"], endpoint="api_attendance_qr_manual")
    def api_attendance_qr_manual():
        payload = request.get_json(silent=True) or {}
        try:
            form = restore_from_client(payload)
        except ValidationError as e:
            return client_error(str(e))

        form.qr_input = str(payload.get("qr_input") or "")
        form.load_reference_data()
        try:
            student = form.resolve_manual()
        except ValidationError as e:
            return client_error(str(e), form)
        return jsonify({"success": True, "student": student, **form.to_client()})

    @app.route(
        "/api/attendance/qr/<int:student_id>/<int:lesson_id>.png",
        endpoint="api_attendance_qr_card",
    )
    def api_attendance_qr_card(student_id: int, lesson_id: int):
        """Printable attendance card for one student and lesson."""
        buf = io.BytesIO(render_qr_png(encode_qr_payload(student_id, lesson_id)))
        return send_file(buf, mimetype="image/png")
