"""Copy-on-write helpers for the JSON documents stored on projects and contacts.

Every mutating helper takes the current column value (possibly None), returns
a new top-level dict and never touches its input. The caller persists the
returned value as a whole-document replace.

Two structural conventions replace exceptions:

* Not found: ``update_milestone_status`` and ``resolve_issue`` return the input
  object itself (``result is notes``) when there is nothing to update.
* Empty collapse: a removal helper that leaves the document without any
  non-empty list returns None, so an emptied column goes back to NULL.
"""

import math
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

JSONDoc = dict[str, Any]
Entry = Mapping[str, Any]

ACTIVE_ISSUE_STATUSES = frozenset({"open", "in_progress"})


def _append(document: JSONDoc | None, key: str, entry: Entry) -> JSONDoc:
    current = dict(document) if document else {}
    current[key] = [*(current.get(key) or []), dict(entry)]
    return current


def _is_empty(document: JSONDoc) -> bool:
    """True when the document holds no non-empty list."""
    return not any(isinstance(value, list) and value for value in document.values())


def _remove_by_id(document: JSONDoc | None, key: str, entry_id: str) -> JSONDoc | None:
    if not document or document.get(key) is None:
        return document

    updated = {**document, key: [e for e in document[key] if e.get("id") != entry_id]}
    return None if _is_empty(updated) else updated


def _update_by_id(
    document: JSONDoc | None, key: str, entry_id: str, changes: Mapping[str, Any]
) -> JSONDoc | None:
    entries = document.get(key) if document else None
    if not entries or not any(e.get("id") == entry_id for e in entries):
        return document

    return {
        **document,  # type: ignore[dict-item]
        key: [{**e, **changes} if e.get("id") == entry_id else e for e in entries],
    }


# --- Specifications ---


def create_specifications(data: Mapping[str, Any]) -> JSONDoc:
    """Build a specifications document, keeping the known sections first."""
    sections = ("dimensions", "materials", "equipment", "waterFeatures", "safety", "environmental")
    specifications = {section: data[section] for section in sections if section in data}
    specifications.update({k: v for k, v in data.items() if k not in specifications})
    return specifications


def update_specifications(current: JSONDoc | None, updates: Mapping[str, Any]) -> JSONDoc:
    """Shallow-merge updates over the current specifications."""
    return {**(current or {}), **updates}


# --- Images ---


def add_image_to_gallery(images: JSONDoc | None, image: Entry) -> JSONDoc:
    return _append(images, "gallery", image)


def remove_image_from_gallery(images: JSONDoc | None, image_id: str) -> JSONDoc | None:
    """Remove a gallery image by id.

    Returns the input untouched when there is no gallery, and None when the
    removal empties every list in the document.
    """
    return _remove_by_id(images, "gallery", image_id)


def add_progress_image(images: JSONDoc | None, progress_image: Entry) -> JSONDoc:
    return _append(images, "progress", progress_image)


# --- Documents ---


def add_document(documents: JSONDoc | None, category: str, document: Entry) -> JSONDoc:
    return _append(documents, category, document)


def remove_document(
    documents: JSONDoc | None, category: str, document_id: str
) -> JSONDoc | None:
    """Remove a document from a category. Same rules as gallery removal."""
    return _remove_by_id(documents, category, document_id)


# --- Project notes ---


def add_internal_note(notes: JSONDoc | None, note: Entry) -> JSONDoc:
    return _append(notes, "internal", note)


def add_communication_log(notes: JSONDoc | None, communication: Entry) -> JSONDoc:
    return _append(notes, "communication", communication)


def add_milestone(notes: JSONDoc | None, milestone: Entry) -> JSONDoc:
    return _append(notes, "milestones", milestone)


def update_milestone_status(
    notes: JSONDoc | None,
    milestone_id: str,
    status: str,
    actual_date: str | None = None,
) -> JSONDoc | None:
    """Set a milestone's status, and its actualDate when given.

    Returns ``notes`` itself when there is no milestones list or no milestone
    with that id; callers compare identity to detect not-found.
    """
    changes: dict[str, Any] = {"status": status}
    if actual_date:
        changes["actualDate"] = actual_date
    return _update_by_id(notes, "milestones", milestone_id, changes)


def add_issue(notes: JSONDoc | None, issue: Entry) -> JSONDoc:
    return _append(notes, "issues", issue)


def resolve_issue(
    notes: JSONDoc | None,
    issue_id: str,
    resolution: str,
    resolved_by: Any,
) -> JSONDoc | None:
    """Mark an issue resolved. Same not-found convention as milestones."""
    changes = {
        "status": "resolved",
        "resolvedAt": datetime.now(UTC).isoformat(),
        "resolvedBy": resolved_by,
        "resolution": resolution,
    }
    return _update_by_id(notes, "issues", issue_id, changes)


# --- Contact notes ---


def add_contact_communication(notes: JSONDoc | None, communication: Entry) -> JSONDoc:
    return _append(notes, "communication", communication)


def add_follow_up(notes: JSONDoc | None, follow_up: Entry) -> JSONDoc:
    return _append(notes, "followUps", follow_up)


def update_qualification(notes: JSONDoc | None, qualification: Mapping[str, Any]) -> JSONDoc:
    """Merge qualification fields into the contact's notes."""
    current = dict(notes) if notes else {}
    current["qualification"] = {**(current.get("qualification") or {}), **qualification}
    return current


# --- Queries ---


def search_by_pool_type(specifications: JSONDoc | None, pool_type: str) -> bool:
    pool_shell = ((specifications or {}).get("materials") or {}).get("poolShell")
    if not pool_shell:
        return False
    return pool_type.lower() in str(pool_shell).lower()


def search_by_equipment(specifications: JSONDoc | None, equipment_type: str) -> bool:
    equipment = (specifications or {}).get("equipment")
    if not equipment:
        return False

    needle = equipment_type.lower()
    return any(
        isinstance(item, Mapping) and needle in str(item.get("type", "")).lower()
        for item in equipment.values()
    )


def has_water_feature(specifications: JSONDoc | None, feature: str) -> bool:
    """Case-insensitive key match on waterFeatures; the value must be truthy."""
    features = (specifications or {}).get("waterFeatures")
    if not features:
        return False

    needle = feature.lower()
    return any(needle in key.lower() and bool(value) for key, value in features.items())


def get_progress_ratio(notes: JSONDoc | None) -> float:
    """Unrounded share of completed milestones, 0.0 to 100.0."""
    milestones = (notes or {}).get("milestones") or []
    if not milestones:
        return 0.0

    completed = sum(1 for m in milestones if m.get("status") == "completed")
    return completed * 100 / len(milestones)


def get_progress_percentage(notes: JSONDoc | None) -> int:
    # Halves round up (12.5 -> 13), not to even
    return math.floor(get_progress_ratio(notes) + 0.5)


def get_active_issues_count(notes: JSONDoc | None) -> int:
    issues = (notes or {}).get("issues") or []
    return sum(1 for issue in issues if issue.get("status") in ACTIVE_ISSUE_STATUSES)


def _parse_date(value: Any) -> datetime | None:
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def get_upcoming_milestones(
    notes: JSONDoc | None,
    days: int = 7,
    now: datetime | None = None,
) -> list[JSONDoc]:
    """Pending milestones planned on or before ``now + days``.

    There is no lower bound: overdue milestones that are still pending are
    included. Milestones whose plannedDate cannot be parsed are skipped.
    """
    milestones = (notes or {}).get("milestones") or []
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    cutoff = now + timedelta(days=days)

    upcoming = []
    for milestone in milestones:
        if milestone.get("status") != "pending":
            continue
        planned = _parse_date(milestone.get("plannedDate"))
        if planned is not None and planned <= cutoff:
            upcoming.append(milestone)
    return upcoming


# --- Validation ---


def _is_document(value: Any) -> bool:
    return isinstance(value, Mapping)


def validate_specifications(value: Any) -> bool:
    return _is_document(value)


def validate_images(value: Any) -> bool:
    return _is_document(value)


def validate_documents(value: Any) -> bool:
    return _is_document(value)


def validate_notes(value: Any) -> bool:
    return _is_document(value)
