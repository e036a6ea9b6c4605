from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..api.repository import ResourceRepository
from ..common.validators import parse_int, text
from ..forms.mode import FormMode, is_edit
from ..forms.reference import ReferenceDataLoader
from ..forms.state import FieldView, FormState, choice_options, first_error
from ..i18n.translator import Translator
from .model import COURSES_RESOURCE, EXAM_DEFAULTS, EXAMS_RESOURCE


class ExamForm:
    def __init__(
        self,
        repository: ResourceRepository,
        translator: Translator,
        initial: Optional[Mapping[str, Any]] = None,
        *,
        mode: Optional[FormMode] = None,
        loader: Optional[ReferenceDataLoader] = None,
    ):
        self._repository = repository
        self._t = translator
        self._loader = loader or ReferenceDataLoader(repository)
        self.state = FormState(
            EXAM_DEFAULTS,
            initial,
            mode=mode,
            coercers={
                "title": text,
                "exam_date": text,
                "max_mark": parse_int,
                "passing_mark": parse_int,
                "course_id": parse_int,
            },
        )
        self.courses: List[Dict[str, Any]] = []

    @property
    def mode(self) -> FormMode:
        return self.state.mode

    def load_reference_data(self) -> None:
        self.courses = self._loader.load(COURSES_RESOURCE)[COURSES_RESOURCE]

    def build_payload(self) -> Dict[str, Any]:
        return self.state.values()

    def submit(self) -> Dict[str, Any]:
        with self.state.submitting():
            return self._repository.save(EXAMS_RESOURCE, self.build_payload(), record_id=self.mode.record_id)

    @property
    def title(self) -> str:
        return self._t("exams.editExam" if is_edit(self.mode) else "exams.addNewExam")

    @property
    def submit_label(self) -> str:
        return self._t("exams.updateExam" if is_edit(self.mode) else "exams.createExam")

    def fields(self, errors: Optional[Mapping[str, List[str]]] = None) -> List[FieldView]:
        t = self._t

        def field(name: str, label: str, kind: str, **kwargs: Any) -> FieldView:
            return FieldView(
                name=name,
                label=t(label),
                kind=kind,
                value=self.state[name],
                required=True,
                error=first_error(errors, name),
                **kwargs,
            )

        return [
            field("title", "exams.examTitle", "text"),
            field("exam_date", "exams.examDate", "date"),
            field("max_mark", "exams.maximumMark", "number"),
            field("passing_mark", "exams.passingMark", "number"),
            field("course_id", "exams.course", "select", options=choice_options(self.courses, label="title")),
        ]
