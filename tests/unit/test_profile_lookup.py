import uuid

from parcel_api.services.profile_lookup import fetch_profile, get_profile_lookup


def test_fetch_profile_returns_summary(db_session, customer_id):
    profile = fetch_profile(db_session, customer_id)

    assert profile is not None
    assert profile.id == customer_id
    assert profile.full_name == "Ada Sender"
    assert profile.email == "ada@example.com"


def test_fetch_profile_returns_none_for_unknown_id(db_session):
    assert fetch_profile(db_session, uuid.uuid4()) is None


def test_default_lookup_is_database_fetch():
    assert get_profile_lookup() is fetch_profile
