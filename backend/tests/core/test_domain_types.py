"""Domain Types — visibility enum and attribute sets.

Tests:
    - ParticipantStatus is exactly two states
    - from_active accepts bool and 0/1, to_storage yields bool
    - filters and projections name the expected attributes
"""

from participant_api.core.domain_types import (
    DELETED_LISTING_FIELDS, HOME_FIELDS, PARTICIPANT_FIELDS, SOFT_DELETED_FILTER,
    UPDATABLE_FIELDS, VISIBLE_FILTER, WORK_FIELDS, ParticipantEmail,
    ParticipantStatus, ReturnValues,
)


def test_participant_status_has_two_states():
    assert set(ParticipantStatus) == {
        ParticipantStatus.VISIBLE,
        ParticipantStatus.SOFT_DELETED,
    }


def test_from_active_accepts_booleans_and_integers():
    assert ParticipantStatus.from_active(True) is ParticipantStatus.VISIBLE
    assert ParticipantStatus.from_active(1) is ParticipantStatus.VISIBLE
    assert ParticipantStatus.from_active(False) is ParticipantStatus.SOFT_DELETED
    assert ParticipantStatus.from_active(0) is ParticipantStatus.SOFT_DELETED


def test_to_storage_is_boolean():
    assert ParticipantStatus.VISIBLE.to_storage() is True
    assert ParticipantStatus.SOFT_DELETED.to_storage() is False


def test_visibility_filters_use_storage_form():
    assert VISIBLE_FILTER == {"active": True}
    assert SOFT_DELETED_FILTER == {"active": False}


def test_email_is_the_only_non_updatable_field():
    assert PARTICIPANT_FIELDS[0] == "email"
    assert "email" not in UPDATABLE_FIELDS
    assert set(UPDATABLE_FIELDS) | {"email"} == set(PARTICIPANT_FIELDS)


def test_projection_sets():
    assert DELETED_LISTING_FIELDS == ("firstname", "lastname", "email")
    assert all(path.startswith("work.") for path in WORK_FIELDS)
    assert all(path.startswith("home.") for path in HOME_FIELDS)


def test_identity_type_wraps_str():
    assert ParticipantEmail("a@b.com") == "a@b.com"


def test_return_values_serialize_to_string():
    assert ReturnValues.ALL_NEW.value == "ALL_NEW"
    assert ReturnValues.UPDATED_NEW.value == "UPDATED_NEW"
