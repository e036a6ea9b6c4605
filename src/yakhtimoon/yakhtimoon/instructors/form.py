from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from werkzeug.datastructures import FileStorage, MultiDict

from ..api.repository import ResourceRepository
from ..common.validators import int_list, passwords_match, str_list, text
from ..core.constants import QURAN_PARTS, RELIGIOUS_QUALIFICATIONS
from ..core.exceptions import PasswordMismatchError
from ..forms.mode import FormMode, is_edit
from ..forms.payload import build_multipart
from ..forms.state import ChoiceOption, FieldView, FormState, first_error
from ..i18n.translator import Translator
from .model import INSTRUCTOR_DEFAULTS, INSTRUCTORS_RESOURCE, LIST_FIELDS, TEXT_FIELDS


class InstructorForm:
    """Instructor profile, submitted as a multi-part form because of the profile image."""

    def __init__(
        self,
        repository: ResourceRepository,
        translator: Translator,
        initial: Optional[Mapping[str, Any]] = None,
        *,
        mode: Optional[FormMode] = None,
    ):
        self._repository = repository
        self._t = translator
        coercers = {name: text for name in TEXT_FIELDS}
        coercers.update(
            religious_qualifications=str_list,
            quran_memorized_parts=int_list,
            quran_passed_parts=int_list,
        )
        self.state = FormState(INSTRUCTOR_DEFAULTS, initial, mode=mode, coercers=coercers)
        # The confirmation is never echoed back from a stored record.
        self.state.update("password_confirmation", "")
        self.image_file: Optional[FileStorage] = None
        self.show_password = False
        self.show_confirm_password = False

    @property
    def mode(self) -> FormMode:
        return self.state.mode

    def choose_image(self, file: Optional[FileStorage]) -> None:
        """Select a new profile image; an empty upload field keeps the stored one."""
        self.image_file = file if file is not None and file.filename else None

    def toggle_password_visibility(self) -> bool:
        self.show_password = not self.show_password
        return self.show_password

    def toggle_confirmation_visibility(self) -> bool:
        self.show_confirm_password = not self.show_confirm_password
        return self.show_confirm_password

    def check_passwords(self) -> None:
        if not passwords_match(self.state["password"], self.state["password_confirmation"]):
            raise PasswordMismatchError(self._t("instructors.passwordsDoNotMatch"))

    def build_payload(self) -> MultiDict:
        values = self.state.values()
        scalars = {name: values[name] or "" for name in TEXT_FIELDS}
        lists = {name: values[name] or [] for name in LIST_FIELDS}
        return build_multipart(scalars, lists, {"instructor_img": self.image_file})

    def submit(self) -> Dict[str, Any]:
        self.check_passwords()
        with self.state.submitting():
            payload = self.build_payload()
            return self._repository.save(INSTRUCTORS_RESOURCE, payload, record_id=self.mode.record_id)

    @property
    def title(self) -> str:
        return self._t("instructors.editInstructor" if is_edit(self.mode) else "instructors.addNewInstructor")

    @property
    def subtitle(self) -> str:
        key = "instructors.updateInstructorDetails" if is_edit(self.mode) else "instructors.fillInstructorDetails"
        return self._t(key)

    @property
    def submit_label(self) -> str:
        return self._t("instructors.updateInstructor" if is_edit(self.mode) else "instructors.createInstructor")

    def sections(self, errors: Optional[Mapping[str, List[str]]] = None) -> List[Tuple[str, List[FieldView]]]:
        t = self._t
        creating = not is_edit(self.mode)

        def field(name: str, label: str, kind: str = "text", **kwargs: Any) -> FieldView:
            return FieldView(
                name=name,
                label=t(label),
                kind=kind,
                value=self.state[name],
                error=first_error(errors, name),
                **kwargs,
            )

        quran_parts = tuple(ChoiceOption(value=n, label=t("quran.part", number=n)) for n in QURAN_PARTS)
        qualifications = tuple(ChoiceOption(value=q, label=q) for q in RELIGIOUS_QUALIFICATIONS)

        return [
            (
                t("instructors.personalInformation"),
                [
                    field("name", "instructors.fullName", required=True),
                    field("email", "instructors.email", "email", required=True),
                    field(
                        "password",
                        "instructors.password",
                        "text" if self.show_password else "password",
                        required=creating,
                        attrs={"toggle": t("instructors.hide" if self.show_password else "instructors.show")},
                    ),
                    field(
                        "password_confirmation",
                        "instructors.confirmPassword",
                        "text" if self.show_confirm_password else "password",
                        required=creating,
                        attrs={"toggle": t("instructors.hide" if self.show_confirm_password else "instructors.show")},
                    ),
                    field("phone_number", "instructors.phoneNumber", required=True),
                    field("birth_date", "instructors.birthDate", "date", required=True),
                    field("certificate", "instructors.certificate"),
                ],
            ),
            (
                t("instructors.contactAddress"),
                [field("address", "instructors.address", required=True)],
            ),
            (
                t("instructors.qualificationsExpertise"),
                [
                    FieldView(
                        name="instructor_img",
                        label=t("instructors.profileImage"),
                        kind="file",
                        value=self.state["instructor_img"],
                        placeholder=t("instructors.uploadProfileImage"),
                        error=first_error(errors, "instructor_img"),
                    ),
                    field(
                        "religious_qualifications",
                        "instructors.religiousQualifications",
                        "multiselect",
                        options=qualifications,
                        placeholder=t("instructors.selectQualifications"),
                    ),
                ],
            ),
            (
                t("instructors.quranKnowledge"),
                [
                    field(
                        "quran_memorized_parts",
                        "instructors.quranMemorizedParts",
                        "multiselect",
                        options=quran_parts,
                        placeholder=t("instructors.selectMemorizedParts"),
                    ),
                    field(
                        "quran_passed_parts",
                        "instructors.quranPassedParts",
                        "multiselect",
                        options=quran_parts,
                        placeholder=t("instructors.selectPassedParts"),
                    ),
                ],
            ),
        ]
