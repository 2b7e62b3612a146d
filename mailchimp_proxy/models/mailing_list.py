# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""MailChimp list (audience) entity."""
from typing import Any, Dict, Optional

from mailchimp_proxy.models.entity import MailChimpEntity


class MailChimpList(MailChimpEntity):
    FILLABLE = (
        "name", "permission_reminder", "use_archive_bar", "campaign_defaults",
        "notify_on_subscribe", "notify_on_unsubscribe", "email_type_option",
        "visibility", "contact",
    )
    WRITE_ONCE = ("list_id", "mail_chimp_id")
    VALIDATION_RULES = {
        "name": "required|string",
        "permission_reminder": "required|string",
        "use_archive_bar": "nullable|boolean",
        "campaign_defaults": "required|array",
        "campaign_defaults.from_name": "required|string",
        "campaign_defaults.from_email": "required|email",
        "campaign_defaults.subject": "required|string",
        "campaign_defaults.language": "required|string",
        "notify_on_subscribe": "nullable|email",
        "notify_on_unsubscribe": "nullable|email",
        "email_type_option": "required|boolean",
        "visibility": "nullable|in:pub,prv",
        "contact": "required|array",
        "contact.company": "required|string",
        "contact.address1": "required|string",
        "contact.address2": "nullable|string",
        "contact.city": "required|string",
        "contact.state": "required|string",
        "contact.zip": "required|string",
        "contact.country": "required|string|size:2",
        "contact.phone": "nullable|string",
    }

    list_id: Optional[str] = None
    name: str
    permission_reminder: str
    use_archive_bar: Optional[bool] = None
    campaign_defaults: Dict[str, Any]
    notify_on_subscribe: Optional[str] = None
    notify_on_unsubscribe: Optional[str] = None
    email_type_option: bool
    visibility: Optional[str] = None
    contact: Dict[str, Any]

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MailChimpList":
        return cls(**cls.fillable(data))
