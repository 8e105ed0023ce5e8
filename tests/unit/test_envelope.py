import pytest

from redmine_api.envelope import ENTITY_KEYS, PAGINATION_KEYS, keys_for, unwrap, unwrap_page, wrap
from redmine_api.errors import DecodeError, EnvelopeMismatch, PaginationKeyError


def test_wrap_then_unwrap_is_identity():
    payload = {"id": 1, "subject": "hello", "custom_fields": [{"id": 2, "value": "x"}]}
    assert unwrap(wrap("issue", payload), "issue") == payload


def test_unwrap_missing_key_raises_envelope_mismatch():
    with pytest.raises(EnvelopeMismatch) as excinfo:
        unwrap({"project": {"id": 1}}, "issue")
    assert excinfo.value.expected_key == "issue"
    assert excinfo.value.found_keys == ["project"]


def test_unwrap_rejects_ambiguous_envelope():
    with pytest.raises(EnvelopeMismatch):
        unwrap({"issue": {"id": 1}, "extra": True}, "issue")


def test_unwrap_rejects_non_object_body():
    with pytest.raises(DecodeError):
        unwrap([{"id": 1}], "issue")


def test_envelope_mismatch_is_a_decode_error():
    with pytest.raises(DecodeError):
        unwrap({}, "issue")


def test_keys_table_has_singular_and_plural_forms():
    assert keys_for("issue") == ("issue", "issues")
    assert keys_for("time_entry").plural == "time_entries"
    assert keys_for("issue_category").plural == "issue_categories"
    assert all(keys.singular and keys.plural for keys in ENTITY_KEYS.values())


def test_keys_for_unknown_entity():
    with pytest.raises(KeyError):
        keys_for("spaceship")


def test_unwrap_page_returns_values_and_counters():
    body = {"issues": [{"id": 1}, {"id": 2}], "total_count": 7, "offset": 0, "limit": 2}
    values, total_count, offset, limit = unwrap_page(body, "issues")
    assert values == [{"id": 1}, {"id": 2}]
    assert (total_count, offset, limit) == (7, 0, 2)


@pytest.mark.parametrize("missing", ["total_count", "offset", "limit"])
def test_unwrap_page_missing_pagination_key(missing):
    body = {"issues": [], "total_count": 0, "offset": 0, "limit": 25}
    del body[missing]
    with pytest.raises(PaginationKeyError) as excinfo:
        unwrap_page(body, "issues")
    assert excinfo.value.key == missing
    assert not excinfo.value.wrong_type


@pytest.mark.parametrize("bad_value", ["10", -1, True, None, 1.5])
def test_unwrap_page_pagination_key_wrong_type(bad_value):
    body = {"issues": [], "total_count": bad_value, "offset": 0, "limit": 25}
    with pytest.raises(PaginationKeyError) as excinfo:
        unwrap_page(body, "issues")
    assert excinfo.value.wrong_type


def test_unwrap_page_missing_collection_key():
    with pytest.raises(EnvelopeMismatch):
        unwrap_page({"projects": [], "total_count": 0, "offset": 0, "limit": 25}, "issues")


def test_unwrap_page_collection_must_be_a_list():
    with pytest.raises(DecodeError):
        unwrap_page({"issues": {"id": 1}, "total_count": 1, "offset": 0, "limit": 25}, "issues")


def test_unwrap_allows_listed_extra_keys_only():
    body = {"versions": [{"id": 1}], "total_count": 1}
    assert unwrap(body, "versions", PAGINATION_KEYS) == [{"id": 1}]
    with pytest.raises(EnvelopeMismatch):
        unwrap({**body, "unexpected": True}, "versions", PAGINATION_KEYS)
