"""Tests for the JSON document helpers (src/poolsite/core/project_data.py).

Tests cover:
- Append helpers: list creation, ordering, copy-on-write
- Removal helpers: empty collapse to None, unknown ids
- Milestone/issue updates: not-found returns the input object itself
- Derived views: progress, active issues, upcoming milestones, search matchers
"""

import copy
from datetime import UTC, datetime

import pytest

from src.poolsite.core import project_data

pytestmark = pytest.mark.unit


def _milestone(id: str, status: str = "pending", planned: str = "2024-01-15") -> dict:
    return {"id": id, "title": f"Milestone {id}", "plannedDate": planned, "status": status}


def _issue(id: str, status: str = "open") -> dict:
    return {"id": id, "title": "Leak", "severity": "high", "status": status}


class TestGallery:
    def test_add_creates_gallery_when_images_is_none(self):
        result = project_data.add_image_to_gallery(None, {"id": "img_1", "url": "/a.jpg"})

        assert result == {"gallery": [{"id": "img_1", "url": "/a.jpg"}]}

    def test_add_appends_and_keeps_other_lists(self):
        images = {"gallery": [{"id": "img_1"}], "progress": [{"id": "progress_1"}]}

        result = project_data.add_image_to_gallery(images, {"id": "img_2"})

        assert [i["id"] for i in result["gallery"]] == ["img_1", "img_2"]
        assert result["progress"] == [{"id": "progress_1"}]

    def test_add_does_not_mutate_input(self):
        images = {"gallery": [{"id": "img_1"}]}
        snapshot = copy.deepcopy(images)

        result = project_data.add_image_to_gallery(images, {"id": "img_2"})

        assert images == snapshot
        assert result is not images
        assert result["gallery"] is not images["gallery"]

    def test_add_allows_duplicate_ids(self):
        images = {"gallery": [{"id": "img_1"}]}

        result = project_data.add_image_to_gallery(images, {"id": "img_1"})

        assert len(result["gallery"]) == 2

    def test_remove_filters_matching_image(self):
        images = {"gallery": [{"id": "img_1"}, {"id": "img_2"}]}

        result = project_data.remove_image_from_gallery(images, "img_1")

        assert result == {"gallery": [{"id": "img_2"}]}
        assert len(images["gallery"]) == 2

    def test_remove_last_image_collapses_to_none(self):
        images = {"gallery": [{"id": "img_1"}]}

        assert project_data.remove_image_from_gallery(images, "img_1") is None

    def test_remove_last_gallery_image_keeps_progress_images(self):
        images = {"gallery": [{"id": "img_1"}], "progress": [{"id": "progress_1"}]}

        result = project_data.remove_image_from_gallery(images, "img_1")

        assert result == {"gallery": [], "progress": [{"id": "progress_1"}]}

    def test_remove_from_none_returns_none(self):
        assert project_data.remove_image_from_gallery(None, "img_1") is None

    def test_remove_from_already_empty_gallery_collapses_to_none(self):
        images = {"gallery": [], "progress": []}

        assert project_data.remove_image_from_gallery(images, "img_1") is None

    def test_remove_without_gallery_returns_input(self):
        images = {"progress": [{"id": "progress_1"}]}

        assert project_data.remove_image_from_gallery(images, "img_1") is images

    def test_remove_unknown_id_keeps_entries(self):
        images = {"gallery": [{"id": "img_1"}]}

        assert project_data.remove_image_from_gallery(images, "img_404") == images

    def test_add_progress_image(self):
        result = project_data.add_progress_image(
            {"gallery": [{"id": "img_1"}]}, {"id": "progress_1", "phase": "excavation"}
        )

        assert result["progress"] == [{"id": "progress_1", "phase": "excavation"}]
        assert result["gallery"] == [{"id": "img_1"}]


class TestDocuments:
    def test_add_document_to_category(self):
        result = project_data.add_document(None, "permits", {"id": "doc_1", "name": "Permit"})

        assert result == {"permits": [{"id": "doc_1", "name": "Permit"}]}

    def test_remove_document_only_touches_its_category(self):
        documents = {"permits": [{"id": "doc_1"}], "contracts": [{"id": "doc_2"}]}

        result = project_data.remove_document(documents, "permits", "doc_1")

        assert result == {"permits": [], "contracts": [{"id": "doc_2"}]}

    def test_remove_last_document_collapses_to_none(self):
        documents = {"permits": [{"id": "doc_1"}]}

        assert project_data.remove_document(documents, "permits", "doc_1") is None

    def test_remove_from_empty_category_collapses_to_none(self):
        assert project_data.remove_document({"permits": []}, "permits", "doc_1") is None

    def test_remove_from_missing_category_returns_input(self):
        documents = {"permits": [{"id": "doc_1"}]}

        assert project_data.remove_document(documents, "contracts", "doc_1") is documents


class TestNotes:
    def test_add_milestone_to_none(self):
        milestone = _milestone("m1")

        result = project_data.add_milestone(None, milestone)

        assert result == {"milestones": [milestone]}

    def test_each_add_targets_its_own_list(self):
        notes = project_data.add_internal_note(None, {"id": "note_1"})
        notes = project_data.add_communication_log(notes, {"id": "comm_1"})
        notes = project_data.add_milestone(notes, _milestone("m1"))
        notes = project_data.add_issue(notes, _issue("i1"))

        assert set(notes) == {"internal", "communication", "milestones", "issues"}
        assert all(len(entries) == 1 for entries in notes.values())

    def test_update_milestone_status(self):
        notes = {"milestones": [_milestone("m1"), _milestone("m2")]}

        result = project_data.update_milestone_status(notes, "m1", "completed", "2024-01-20")

        assert result["milestones"][0]["status"] == "completed"
        assert result["milestones"][0]["actualDate"] == "2024-01-20"
        assert result["milestones"][1] == notes["milestones"][1]
        assert notes["milestones"][0]["status"] == "pending"

    def test_update_milestone_without_actual_date(self):
        notes = {"milestones": [_milestone("m1")]}

        result = project_data.update_milestone_status(notes, "m1", "in_progress")

        assert "actualDate" not in result["milestones"][0]

    def test_update_unknown_milestone_returns_same_object(self):
        notes = {"milestones": [_milestone("m1")]}

        assert project_data.update_milestone_status(notes, "m404", "completed") is notes

    def test_update_milestone_on_none_returns_none(self):
        assert project_data.update_milestone_status(None, "m1", "completed") is None

    def test_update_milestone_without_list_returns_same_object(self):
        notes = {"internal": [{"id": "note_1"}]}

        assert project_data.update_milestone_status(notes, "m1", "completed") is notes

    def test_resolve_issue(self):
        notes = {"issues": [_issue("i1"), _issue("i2")]}

        result = project_data.resolve_issue(notes, "i1", "fixed", 7)

        resolved = result["issues"][0]
        assert resolved["status"] == "resolved"
        assert resolved["resolution"] == "fixed"
        assert resolved["resolvedBy"] == 7
        assert datetime.fromisoformat(resolved["resolvedAt"]).tzinfo is not None
        assert result["issues"][1]["status"] == "open"

    def test_resolve_unknown_issue_returns_same_object(self):
        notes = {"issues": [_issue("i1")]}

        assert project_data.resolve_issue(notes, "i404", "fixed", 7) is notes

    def test_issue_scenario_active_count(self):
        notes = project_data.add_issue(None, _issue("i1"))
        assert project_data.get_active_issues_count(notes) == 1

        notes = project_data.resolve_issue(notes, "i1", "fixed", 7)
        assert project_data.get_active_issues_count(notes) == 0


class TestContactNotes:
    def test_follow_up_and_communication(self):
        notes = project_data.add_contact_communication(None, {"id": "comm_1"})
        notes = project_data.add_follow_up(notes, {"id": "followup_1"})

        assert notes == {"communication": [{"id": "comm_1"}], "followUps": [{"id": "followup_1"}]}

    def test_qualification_merges_fields(self):
        notes = {"qualification": {"budget": 50000, "timeline": "summer"}}

        result = project_data.update_qualification(notes, {"timeline": "spring"})

        assert result["qualification"] == {"budget": 50000, "timeline": "spring"}
        assert notes["qualification"]["timeline"] == "summer"


class TestSpecifications:
    def test_create_keeps_known_sections_first(self):
        result = project_data.create_specifications(
            {"custom": {"x": 1}, "safety": {"fence": True}, "dimensions": {"length": 8}}
        )

        assert list(result) == ["dimensions", "safety", "custom"]

    def test_update_is_shallow_merge(self):
        current = {"dimensions": {"length": 8, "width": 4}, "safety": {"fence": True}}

        result = project_data.update_specifications(current, {"dimensions": {"length": 10}})

        assert result == {"dimensions": {"length": 10}, "safety": {"fence": True}}
        assert current["dimensions"]["width"] == 4

    def test_update_from_none(self):
        assert project_data.update_specifications(None, {"safety": {}}) == {"safety": {}}


class TestDerivedViews:
    @pytest.mark.parametrize(
        ("statuses", "expected"),
        [
            ([], 0),
            (["pending"], 0),
            (["completed"], 100),
            (["completed", "pending", "pending"], 33),
            (["completed", "completed", "pending"], 67),
            (["completed"] + ["pending"] * 7, 13),
            (["completed"] * 5 + ["pending"] * 3, 63),
            (["completed"] + ["pending"] * 39, 3),
        ],
    )
    def test_progress_percentage(self, statuses, expected):
        notes = {"milestones": [_milestone(str(i), s) for i, s in enumerate(statuses)]}

        assert project_data.get_progress_percentage(notes) == expected

    def test_progress_percentage_of_none(self):
        assert project_data.get_progress_percentage(None) == 0

    def test_progress_ratio_is_unrounded(self):
        notes = {"milestones": [_milestone("1", "completed")] + [_milestone("2")] * 7}

        assert project_data.get_progress_ratio(notes) == 12.5
        assert project_data.get_progress_ratio(None) == 0.0

    def test_active_issue_statuses(self):
        notes = {
            "issues": [
                _issue("1", "open"),
                _issue("2", "in_progress"),
                _issue("3", "resolved"),
                _issue("4", "closed"),
            ]
        }

        assert project_data.get_active_issues_count(notes) == 2

    def test_upcoming_milestone_scenario(self):
        notes = project_data.add_milestone(None, _milestone("m1", planned="2024-01-15"))

        upcoming = project_data.get_upcoming_milestones(
            notes, 7, now=datetime(2024, 1, 10, tzinfo=UTC)
        )

        assert [m["id"] for m in upcoming] == ["m1"]

    def test_upcoming_includes_overdue_pending(self):
        notes = {"milestones": [_milestone("old", planned="2023-01-01")]}

        upcoming = project_data.get_upcoming_milestones(
            notes, 7, now=datetime(2024, 1, 10, tzinfo=UTC)
        )

        assert len(upcoming) == 1

    def test_upcoming_excludes_far_future_and_non_pending(self):
        notes = {
            "milestones": [
                _milestone("far", planned="2024-03-01"),
                _milestone("done", status="completed", planned="2024-01-12"),
                _milestone("bad", planned="not a date"),
            ]
        }

        upcoming = project_data.get_upcoming_milestones(
            notes, 7, now=datetime(2024, 1, 10, tzinfo=UTC)
        )

        assert upcoming == []

    def test_water_feature_requires_truthy_value(self):
        specs = {"waterFeatures": {"spa": True, "waterfalls": 0}}

        assert project_data.has_water_feature(specs, "spa") is True
        assert project_data.has_water_feature(specs, "waterfalls") is False

    def test_water_feature_is_case_insensitive_substring(self):
        specs = {"waterFeatures": {"fountains": 2}}

        assert project_data.has_water_feature(specs, "FOUNTAIN") is True
        assert project_data.has_water_feature(None, "spa") is False

    def test_search_by_pool_type(self):
        specs = {"materials": {"poolShell": "Reinforced Concrete"}}

        assert project_data.search_by_pool_type(specs, "concrete") is True
        assert project_data.search_by_pool_type(specs, "fiberglass") is False
        assert project_data.search_by_pool_type({}, "concrete") is False

    def test_search_by_equipment(self):
        specs = {"equipment": {"pump": {"type": "Variable Speed"}, "heater": {"type": "Heat pump"}}}

        assert project_data.search_by_equipment(specs, "variable") is True
        assert project_data.search_by_equipment(specs, "HEAT") is True
        assert project_data.search_by_equipment(specs, "robot") is False
        assert project_data.search_by_equipment(None, "pump") is False


class TestValidation:
    @pytest.mark.parametrize(
        "validator",
        [
            project_data.validate_specifications,
            project_data.validate_images,
            project_data.validate_documents,
            project_data.validate_notes,
        ],
    )
    def test_accepts_objects_only(self, validator):
        assert validator({}) is True
        assert validator({"anything": [1, 2]}) is True
        assert validator(None) is False
        assert validator([]) is False
        assert validator("text") is False
