from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, MutableMapping, Optional

from ..core.enums import Section
from ..core.exceptions import ValidationError
from ..i18n.translator import Translator

SESSION_ACTIVE_KEY = "active_section"
SESSION_OPEN_KEY = "sidebar_open"

SECTION_ICONS = {
    Section.COURSES: "book-open",
    Section.STUDENTS: "users",
    Section.INSTRUCTORS: "graduation-cap",
    Section.LESSONS: "calendar",
    Section.EXAMS: "file-text",
    Section.ATTENDANCE: "check-square",
    Section.STUDENT_EXAMS: "award",
    Section.RECITATION: "mic",
    Section.COURSE_FILES: "folder-open",
}


@dataclass(frozen=True)
class NavigationItem:
    id: str
    label: str
    icon: str
    is_active: bool


@dataclass
class Sidebar:
    """Navigation shell state: the active section and the mobile drawer."""

    active: Section = Section.COURSES
    is_open: bool = False

    @classmethod
    def from_session(cls, session: Mapping[str, Any]) -> "Sidebar":
        try:
            active = Section(session.get(SESSION_ACTIVE_KEY, Section.COURSES.value))
        except ValueError:
            active = Section.COURSES
        return cls(active=active, is_open=bool(session.get(SESSION_OPEN_KEY, False)))

    def save(self, session: MutableMapping[str, Any]) -> None:
        session[SESSION_ACTIVE_KEY] = self.active.value
        session[SESSION_OPEN_KEY] = self.is_open

    def select(self, section_id: str, translator: Optional[Translator] = None) -> Section:
        try:
            section = Section(section_id)
        except ValueError as exc:
            t = translator or Translator()
            raise ValidationError(t("navigation.unknownSection", section=section_id)) from exc
        self.active = section
        # Selecting closes the overlay drawer on narrow viewports.
        self.is_open = False
        return section

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def items(self, translator: Translator) -> List[NavigationItem]:
        return [
            NavigationItem(
                id=section.value,
                label=translator(f"navigation.{section.value}"),
                icon=SECTION_ICONS[section],
                is_active=section == self.active,
            )
            for section in Section
        ]
