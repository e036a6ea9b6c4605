from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..api.repository import ResourceRepository
from ..common.validators import int_list, parse_int, text
from ..core.constants import HOMEWORK_COUNT, MAX_JUZ_PAGE, MIN_JUZ_PAGE, QURAN_PARTS, RECITATION_PAGE_COUNT
from ..core.enums import RecitationEvaluation
from ..forms.mode import FormMode, is_edit
from ..forms.state import ChoiceOption, FieldView, FormState, choice_options, first_error
from ..i18n.translator import Translator
from .model import CREATE_FIELDS, RECITATION_DEFAULTS, RECITATIONS_RESOURCE

_EVALUATION_KEYS = {
    RecitationEvaluation.EXCELLENT: "recitation.excellent",
    RecitationEvaluation.GOOD: "recitation.good",
    RecitationEvaluation.FAIR: "recitation.fair",
    RecitationEvaluation.POOR: "recitation.poor",
    RecitationEvaluation.SO_BAD: "recitation.soBad",
}


def _juz(value: Any) -> str:
    return "" if value is None else str(value)


def _juz_page(value: Any) -> int:
    return parse_int(value) or MIN_JUZ_PAGE


class RecitationForm:
    """Recitation entry for one course.

    In create mode only the lesson is collected; progress, evaluation and
    notes become available once the record exists and is reopened.
    """

    def __init__(
        self,
        repository: ResourceRepository,
        translator: Translator,
        recitation: Optional[Mapping[str, Any]] = None,
        *,
        course_lessons: Sequence[Mapping[str, Any]] = (),
        course_students: Sequence[Mapping[str, Any]] = (),
        selected_course_id: Optional[int] = None,
        selected_course_name: str = "",
        selected_student: Optional[Mapping[str, Any]] = None,
        mode: Optional[FormMode] = None,
    ):
        self._repository = repository
        self._t = translator
        self.state = FormState(
            RECITATION_DEFAULTS,
            recitation,
            mode=mode,
            coercers={
                "lesson_id": parse_int,
                "student_id": parse_int,
                "recitation_per_page": int_list,
                "recitation_evaluation": text,
                "current_juz": _juz,
                "current_juz_page": _juz_page,
                "recitation_notes": text,
                "homework": int_list,
            },
        )
        for name in ("current_juz", "current_juz_page"):
            self.state.set_from_input(name, self.state[name])

        self.course_lessons = list(course_lessons)
        self.course_students = list(course_students)
        self.selected_course_id = selected_course_id
        self.selected_course_name = selected_course_name
        self.selected_student = dict(selected_student) if selected_student else None

    @property
    def mode(self) -> FormMode:
        return self.state.mode

    @property
    def editing(self) -> bool:
        return is_edit(self.mode)

    def build_payload(self) -> Dict[str, Any]:
        values = self.state.values()
        if not self.editing:
            return {name: values[name] for name in CREATE_FIELDS}
        return values

    def submit(self) -> Dict[str, Any]:
        with self.state.submitting():
            return self._repository.save(RECITATIONS_RESOURCE, self.build_payload(), record_id=self.mode.record_id)

    @property
    def title(self) -> str:
        return self._t("recitation.editRecitationRecord" if self.editing else "recitation.addNewRecitation")

    @property
    def subtitle(self) -> str:
        return self._t("recitation.updateRecitationDetails" if self.editing else "recitation.fillRecitationDetails")

    @property
    def submit_label(self) -> str:
        return self._t("recitation.updateRecitation" if self.editing else "recitation.createRecitation")

    def sections(self, errors: Optional[Mapping[str, List[str]]] = None) -> List[Tuple[str, List[FieldView]]]:
        t = self._t

        def field(name: str, label: str, kind: str, **kwargs: Any) -> FieldView:
            return FieldView(
                name=name,
                label=t(label),
                kind=kind,
                value=self.state[name],
                error=first_error(errors, name),
                **kwargs,
            )

        lesson_options = choice_options(
            self.course_lessons,
            label=lambda lesson: f"{lesson.get('lesson_title', '')} - {lesson.get('lesson_date', '')}",
        )
        sections = [
            (
                t("recitation.courseInformation"),
                [
                    FieldView(
                        name="course",
                        label=t("recitation.tahfeezCourse"),
                        kind="info",
                        value=self.selected_course_name,
                    )
                ],
            ),
            (
                t("recitation.sessionDetails"),
                [field("lesson_id", "recitation.lesson", "select", options=lesson_options, required=True)],
            ),
        ]
        if not self.editing:
            return sections

        if self.selected_student:
            student = self.selected_student
            sections.append(
                (
                    t("recitation.studentInfo"),
                    [
                        FieldView(
                            name="student",
                            label=f"{t('recitation.studentId')}: {student.get('id', '')}",
                            kind="info",
                            value=student.get("name", ""),
                            attrs={"image": student.get("student_img")} if student.get("student_img") else {},
                        )
                    ],
                )
            )

        page_options = tuple(
            ChoiceOption(value=n, label=f"{t('recitation.page')} {n}") for n in range(1, RECITATION_PAGE_COUNT + 1)
        )
        homework_options = tuple(
            ChoiceOption(value=n, label=f"{t('recitation.assignment')} {n}") for n in range(1, HOMEWORK_COUNT + 1)
        )
        juz_options = tuple(ChoiceOption(value=str(n), label=t("quran.part", number=n)) for n in QURAN_PARTS)
        evaluation_options = tuple(
            ChoiceOption(value=evaluation.value, label=t(key)) for evaluation, key in _EVALUATION_KEYS.items()
        )

        sections.append(
            (
                t("recitation.recitationProgress"),
                [
                    field(
                        "current_juz_page",
                        "recitation.currentJuzPage",
                        "number",
                        attrs={"min": MIN_JUZ_PAGE, "max": MAX_JUZ_PAGE},
                    ),
                    field("current_juz", "recitation.quranMemorizedParts", "select", options=juz_options),
                    field("recitation_per_page", "recitation.recitationPerPage", "multiselect", options=page_options),
                    field("homework", "recitation.homework", "multiselect", options=homework_options),
                ],
            )
        )
        sections.append(
            (
                t("recitation.evaluationNotes"),
                [
                    field("recitation_evaluation", "recitation.evaluation", "select", options=evaluation_options),
                    field(
                        "recitation_notes",
                        "recitation.recitationNotes",
                        "textarea",
                        placeholder=t("recitation.addNotesPlaceholder"),
                    ),
                ],
            )
        )
        return sections

    def rendered_field_names(self) -> List[str]:
        """Names of the editable inputs currently on screen."""
        return [view.name for _, views in self.sections() for view in views if view.kind != "info"]


def _belongs_to(record: Mapping[str, Any], course_id: int) -> bool:
    if parse_int(record.get("course_id"), -1) == course_id:
        return True
    for course in record.get("courses") or []:
        ref = course.get("id") if isinstance(course, Mapping) else course
        if parse_int(ref, -1) == course_id:
            return True
    return False


def scope_to_course(
    course_id: int,
    *,
    courses: Sequence[Mapping[str, Any]],
    lessons: Sequence[Mapping[str, Any]],
    students: Sequence[Mapping[str, Any]],
) -> Tuple[str, List[Mapping[str, Any]], List[Mapping[str, Any]]]:
    """Name of the selected course and the lessons and students enrolled in it."""
    course = next((c for c in courses if parse_int(c.get("id"), -1) == course_id), None)
    name = str(course.get("title") or course.get("name") or "") if course else ""
    return (
        name,
        [lesson for lesson in lessons if _belongs_to(lesson, course_id)],
        [student for student in students if _belongs_to(student, course_id)],
    )
