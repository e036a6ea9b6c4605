from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..api.repository import ResourceRepository
from ..common.datetime_utils import now_utc, to_iso_timestamp
from ..common.logging import get_logger
from ..common.validators import optional_int, parse_int
from ..core.enums import AttendanceMark, ScanState
from ..core.exceptions import InvalidQrFormatError, StudentNotFoundError
from ..forms.mode import FormMode, is_edit
from ..forms.reference import ReferenceDataLoader
from ..forms.state import ChoiceOption, FieldView, FormState, choice_options, first_error
from ..i18n.translator import Translator
from .model import ATTENDANCE_DEFAULTS, ATTENDANCE_RESOURCE, LESSONS_RESOURCE, STUDENTS_RESOURCE
from .qr import parse_qr_payload

logger = get_logger(__name__)


class AttendanceForm:
    """Attendance entry with two identity channels: camera QR scan and typed student number.

    Both channels converge on the same stamping step (present + timestamp), so
    submission does not care how the student was identified.

    Scanner lifecycle: ``IDLE -> SCANNING -> RESOLVED``; toggling while
    scanning cancels back to ``IDLE``, toggling from ``RESOLVED`` scans again.
    """

    def __init__(
        self,
        repository: ResourceRepository,
        translator: Translator,
        initial: Optional[Mapping[str, Any]] = None,
        *,
        mode: Optional[FormMode] = None,
        loader: Optional[ReferenceDataLoader] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._repository = repository
        self._t = translator
        self._loader = loader or ReferenceDataLoader(repository)
        self._clock = clock or now_utc
        self.state = FormState(
            ATTENDANCE_DEFAULTS,
            initial,
            mode=mode,
            coercers={
                "lesson_id": parse_int,
                "student_id": parse_int,
                "student_attendance": optional_int,
                "student_attendance_time": lambda v: v or None,
            },
        )
        self.scan_state = ScanState.IDLE
        self.qr_input = ""
        self.lessons: List[Dict[str, Any]] = []
        self.students: List[Dict[str, Any]] = []

    @property
    def mode(self) -> FormMode:
        return self.state.mode

    @property
    def scanning(self) -> bool:
        return self.scan_state == ScanState.SCANNING

    def load_reference_data(self) -> None:
        lists = self._loader.load(LESSONS_RESOURCE, STUDENTS_RESOURCE)
        self.lessons = lists[LESSONS_RESOURCE]
        self.students = lists[STUDENTS_RESOURCE]

    def restore(self, values: Mapping[str, Any], scan_state: str = ScanState.IDLE.value) -> None:
        """Rebuild a client-held working copy (JSON endpoints are stateless)."""
        self.state.restore(values)
        self.scan_state = ScanState(scan_state)

    def toggle_scanner(self) -> ScanState:
        if self.scan_state == ScanState.SCANNING:
            self.scan_state = ScanState.IDLE
        else:
            self.scan_state = ScanState.SCANNING
        return self.scan_state

    def receive_scan(self, data: Optional[str]) -> bool:
        """Handle one decode attempt. Returns True when the scan resolved a student."""
        if not data:
            return False
        if self.scan_state != ScanState.SCANNING:
            logger.debug("Ignoring QR payload while scanner is off", extra={"scan_state": self.scan_state.value})
            return False

        try:
            payload = parse_qr_payload(data)
        except ValueError as exc:
            raise InvalidQrFormatError(self._t("attendance.invalidQrFormat")) from exc

        self._stamp_present(student_id=payload.student_id, lesson_id=payload.lesson_id)
        self.scan_state = ScanState.RESOLVED
        return True

    def resolve_manual(self, identifier: Any = None) -> Dict[str, Any]:
        """Look a typed student number up in the loaded student list; scan mode is left alone."""
        wanted = optional_int(self.qr_input if identifier is None else identifier)
        student = None
        if wanted is not None:
            student = next((s for s in self.students if parse_int(s.get("id"), -1) == wanted), None)
        if student is None:
            raise StudentNotFoundError(self._t("attendance.studentNotFound"))

        self._stamp_present(student_id=parse_int(student["id"]))
        return student

    def _stamp_present(self, *, student_id: int, lesson_id: Optional[int] = None) -> None:
        self.state.update("student_id", student_id)
        if lesson_id is not None:
            self.state.update("lesson_id", lesson_id)
        self.state.update("student_attendance", int(AttendanceMark.PRESENT))
        self.state.update("student_attendance_time", to_iso_timestamp(self._clock()))

    def build_payload(self) -> Dict[str, Any]:
        payload = self.state.values()
        # Always re-derived: a time pre-filled from an edited record would be stale.
        if payload["student_attendance"] == AttendanceMark.PRESENT:
            payload["student_attendance_time"] = to_iso_timestamp(self._clock())
        else:
            payload["student_attendance_time"] = None
        return payload

    def submit(self) -> Dict[str, Any]:
        with self.state.submitting():
            payload = self.build_payload()
            return self._repository.save(ATTENDANCE_RESOURCE, payload, record_id=self.mode.record_id)

    def to_client(self) -> Dict[str, Any]:
        return {"state": self.state.values(), "scan_state": self.scan_state.value}

    @property
    def title(self) -> str:
        return self._t("attendance.attendanceForm")

    @property
    def subtitle(self) -> str:
        return self._t("attendance.fillAttendanceDetails")

    @property
    def submit_label(self) -> str:
        key = "attendance.updateAttendance" if is_edit(self.mode) else "attendance.createAttendance"
        return self._t(key)

    def fields(self, errors: Optional[Mapping[str, List[str]]] = None) -> List[FieldView]:
        t = self._t
        status_options = (
            ChoiceOption(value=int(AttendanceMark.PRESENT), label=t("attendance.present")),
            ChoiceOption(value=int(AttendanceMark.ABSENT), label=t("attendance.absent")),
        )
        return [
            FieldView(
                name="lesson_id",
                label=t("attendance.lesson"),
                kind="select",
                value=self.state["lesson_id"],
                options=choice_options(self.lessons, label="lesson_title"),
                required=True,
                error=first_error(errors, "lesson_id"),
            ),
            FieldView(
                name="student_id",
                label=t("attendance.student"),
                kind="select",
                value=self.state["student_id"],
                options=choice_options(self.students, label="name"),
                required=True,
                error=first_error(errors, "student_id"),
            ),
            FieldView(
                name="student_attendance",
                label=t("attendance.attendanceStatus"),
                kind="select",
                value=self.state["student_attendance"],
                options=status_options,
                error=first_error(errors, "student_attendance"),
            ),
        ]
