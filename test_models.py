"""Entity tests: subscriber hash, serialisation, assignment rules."""
import hashlib
from datetime import datetime

import pytest

from mailchimp_proxy.models.mailing_list import MailChimpList
from mailchimp_proxy.models.member import MEMBER_STATUSES, MailChimpMember
from testdata import LIST_DATA, MEMBER_DATA


@pytest.fixture
def member():
    return MailChimpMember.from_payload("list-1", MEMBER_DATA)


class TestSubscriberHash:
    def test_md5_of_lowercased_email(self, member):
        expected = hashlib.md5(MEMBER_DATA["email_address"].lower().encode("utf-8")).hexdigest()
        assert member.subscriber_hash == expected

    def test_case_insensitive(self):
        upper = MailChimpMember(list_id="l", email_address="A@B.COM", status="pending")
        lower = MailChimpMember(list_id="l", email_address="a@b.com", status="pending")
        assert upper.subscriber_hash == lower.subscriber_hash
        assert upper.subscriber_hash == hashlib.md5(b"a@b.com").hexdigest()


class TestSerialisation:
    def test_to_dict_contains_every_attribute(self, member):
        data = member.to_dict()
        assert set(data) == {"member_id", "list_id", "mail_chimp_id", "interests", *MEMBER_DATA}
        assert data["member_id"] is None
        assert data["interests"] is None
        assert "version" not in data

    def test_timestamps_render_in_fixed_format(self, member):
        assert isinstance(member.timestamp_signup, datetime)
        assert member.to_dict()["timestamp_signup"] == "2018-11-01 00:00:00"

    def test_mailchimp_payload_drops_local_fields_and_nulls(self, member):
        payload = member.to_mailchimp_payload()
        assert payload == MEMBER_DATA
        assert "list_id" not in payload

    def test_list_to_dict(self):
        mailing_list = MailChimpList.from_payload(LIST_DATA)
        assert mailing_list.to_dict() == {"list_id": None, "mail_chimp_id": None, **LIST_DATA}


class TestAssignment:
    def test_malformed_timestamp_fails_immediately(self, member):
        with pytest.raises(ValueError):
            member.timestamp_opt = "2018-13-45 99:00:00"

    def test_status_restricted_to_enumeration(self, member):
        for status in MEMBER_STATUSES:
            member.status = status
        with pytest.raises(ValueError):
            member.status = "invalid"

    def test_invalid_status_cannot_be_constructed(self):
        with pytest.raises(ValueError):
            MailChimpMember(list_id="l", email_address="a@b.com", status="deleted")

    def test_remote_id_is_write_once(self, member):
        member.mail_chimp_id = "abc"
        member.mail_chimp_id = "abc"
        with pytest.raises(AttributeError):
            member.mail_chimp_id = "def"

    @pytest.mark.parametrize("field", ["list_id", "email_address"])
    def test_identity_fields_are_write_once(self, member, field):
        with pytest.raises(AttributeError):
            setattr(member, field, "changed@example.com")

    def test_fill_ignores_unknown_and_local_keys(self, member):
        member.fill({"status": "subscribed", "member_id": "forged", "colour": "red"})
        assert member.status == "subscribed"
        assert member.member_id is None
