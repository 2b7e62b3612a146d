# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic response schemas."""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

Structured = Optional[Union[Dict[str, Any], List[Any]]]


class MemberOut(BaseModel):
    member_id: str
    list_id: str
    mail_chimp_id: Optional[str] = None
    email_address: str
    email_type: Optional[str] = None
    status: str
    merge_fields: Structured = None
    interests: Structured = None
    language: Optional[str] = None
    vip: Optional[bool] = None
    location: Structured = None
    marketing_permissions: Structured = None
    ip_signup: Optional[str] = None
    timestamp_signup: Optional[str] = None
    ip_opt: Optional[str] = None
    timestamp_opt: Optional[str] = None
    tags: Structured = None


class ListOut(BaseModel):
    list_id: str
    mail_chimp_id: Optional[str] = None
    name: str
    permission_reminder: str
    use_archive_bar: Optional[bool] = None
    campaign_defaults: Dict[str, Any]
    notify_on_subscribe: Optional[str] = None
    notify_on_unsubscribe: Optional[str] = None
    email_type_option: bool
    visibility: Optional[str] = None
    contact: Dict[str, Any]


class MessageResponse(BaseModel):
    message: str


class InvalidDataResponse(MessageResponse):
    errors: Dict[str, List[str]]


ERROR_RESPONSES = {
    400: {"model": InvalidDataResponse, "description": "Invalid data given, or MailChimp rejected the call"},
    404: {"model": MessageResponse, "description": "List or member not found"},
    409: {"model": MessageResponse, "description": "Record changed by a concurrent request"},
}
