# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""MailChimp list member entity."""
import hashlib
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union, get_args

from pydantic import field_validator

from mailchimp_proxy.core.validation import DATE_FORMAT
from mailchimp_proxy.models.entity import MailChimpEntity

MemberStatus = Literal["subscribed", "unsubscribed", "cleaned", "pending"]
MEMBER_STATUSES = get_args(MemberStatus)

# merge_fields, interests, location, ... are stored as-is
Structured = Optional[Union[Dict[str, Any], List[Any]]]


class MailChimpMember(MailChimpEntity):
    FILLABLE = (
        "email_address", "email_type", "status", "merge_fields", "interests",
        "language", "vip", "location", "marketing_permissions", "ip_signup",
        "timestamp_signup", "ip_opt", "timestamp_opt", "tags",
    )
    WRITE_ONCE = ("member_id", "list_id", "mail_chimp_id", "email_address")
    VALIDATION_RULES = {
        "email_address": "required|email",
        "email_type": "nullable|string",
        "status": "required|string|in:" + ",".join(MEMBER_STATUSES),
        "merge_fields": "nullable|array",
        "interests": "nullable|array",
        "language": "nullable|string",
        "vip": "nullable|boolean",
        "location": "nullable|array",
        "location.latitude": "nullable|numeric",
        "location.longitude": "nullable|numeric",
        "marketing_permissions": "nullable|array",
        "marketing_permissions.marketing_permission_id": "nullable|string",
        "marketing_permissions.enabled": "nullable|boolean",
        "ip_signup": "nullable|ipv4",
        "timestamp_signup": "nullable|date_format:" + DATE_FORMAT,
        "ip_opt": "nullable|ipv4",
        "timestamp_opt": "nullable|date_format:" + DATE_FORMAT,
        "tags": "nullable|array",
    }

    member_id: Optional[str] = None
    list_id: str
    email_address: str
    email_type: Optional[str] = None
    status: MemberStatus
    merge_fields: Structured = None
    interests: Structured = None
    language: Optional[str] = None
    vip: Optional[bool] = None
    location: Structured = None
    marketing_permissions: Structured = None
    ip_signup: Optional[str] = None
    timestamp_signup: Optional[datetime] = None
    ip_opt: Optional[str] = None
    timestamp_opt: Optional[datetime] = None
    tags: Structured = None

    @field_validator("timestamp_signup", "timestamp_opt", mode="before")
    @classmethod
    def parse_timestamp(cls, v):
        # strptime raises on malformed input instead of producing a zero date
        if isinstance(v, str):
            return datetime.strptime(v, DATE_FORMAT)
        return v

    @property
    def subscriber_hash(self) -> str:
        """MD5 of the lower-cased email: how MailChimp addresses a list member."""
        return hashlib.md5(self.email_address.lower().encode("utf-8")).hexdigest()

    @classmethod
    def from_payload(cls, list_id: str, data: Dict[str, Any]) -> "MailChimpMember":
        return cls(list_id=list_id, **cls.fillable(data))
