from __future__ import annotations

import logging

from src.yakhtimoon.yakhtimoon.core.exceptions import ApiError
from src.yakhtimoon.yakhtimoon.forms.reference import ReferenceDataLoader


class FlakyRepo:
    def __init__(self, lists, failing=()):
        self._lists = lists
        self._failing = set(failing)
        self.requested = []

    def get_all(self, resource):
        self.requested.append(resource)
        if resource in self._failing:
            raise ApiError(f"GET {resource} failed with HTTP 500", status=500)
        return self._lists.get(resource, [])


def test_loads_every_requested_list():
    repo = FlakyRepo({"lessons": [{"id": 1}], "students": [{"id": 7}, {"id": 8}]})

    lists = ReferenceDataLoader(repo).load("lessons", "students")

    assert lists == {"lessons": [{"id": 1}], "students": [{"id": 7}, {"id": 8}]}
    assert sorted(repo.requested) == ["lessons", "students"]


def test_failed_list_degrades_to_empty_without_affecting_others(caplog):
    repo = FlakyRepo({"lessons": [{"id": 1}]}, failing={"students"})

    with caplog.at_level(logging.ERROR):
        lists = ReferenceDataLoader(repo, max_workers=1).load("lessons", "students")

    assert lists == {"lessons": [{"id": 1}], "students": []}
    assert "Failed to fetch reference list" in caplog.text


def test_no_resources_means_no_requests():
    repo = FlakyRepo({})

    assert ReferenceDataLoader(repo).load() == {}
    assert repo.requested == []
