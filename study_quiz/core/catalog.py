"""Subject/module catalog built from the static configuration."""

from __future__ import annotations

from study_quiz.constants.catalog_constants import MODULE_NAMES, SUBJECT_DEFINITIONS
from study_quiz.core.models import StudyModule, Subject


class SubjectCatalog:
    """Resolves modules and subjects in their fixed enumeration order."""

    def __init__(self, modules: list[StudyModule]) -> None:
        self._modules = sorted(modules, key=lambda module: module.number)

    @classmethod
    def from_definitions(
        cls,
        subject_definitions: tuple[tuple[str, str, int], ...] = SUBJECT_DEFINITIONS,
        module_names: dict[int, str] = MODULE_NAMES,
    ) -> SubjectCatalog:
        subjects = [Subject(name, display_name, module) for name, display_name, module in subject_definitions]
        modules = [
            StudyModule(
                number=number,
                name=name,
                subjects=tuple(subject for subject in subjects if subject.module == number),
            )
            for number, name in module_names.items()
        ]
        return cls(modules)

    def get_modules(self) -> list[StudyModule]:
        return list(self._modules)

    def find_module(self, module_number: int) -> StudyModule | None:
        return next((module for module in self._modules if module.number == module_number), None)

    def find_subject(self, subject_name: str) -> Subject | None:
        return next((subject for subject in self.all_subjects() if subject.name == subject_name), None)

    def all_subjects(self) -> list[Subject]:
        """Every subject, modules ascending, subjects in declaration order."""
        return [subject for module in self._modules for subject in module.subjects]

    def subjects_in_module(self, module_number: int) -> list[Subject]:
        module = self.find_module(module_number)
        return list(module.subjects) if module else []

    def display_name(self, subject_name: str) -> str:
        subject = self.find_subject(subject_name)
        return subject.display_name if subject else subject_name


DEFAULT_CATALOG = SubjectCatalog.from_definitions()
