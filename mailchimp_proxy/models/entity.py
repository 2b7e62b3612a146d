# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Base entity — pure data structure, NO FastAPI dependency.

Assignment is validated (pydantic ``validate_assignment``) so a bad value
fails at the point it is set. Write-once fields refuse to change once they
hold a value.
"""
from datetime import datetime
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from mailchimp_proxy.core.validation import DATE_FORMAT


class MailChimpEntity(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    # Keys a client payload may set; everything else is managed locally.
    FILLABLE: ClassVar[Tuple[str, ...]] = ()
    WRITE_ONCE: ClassVar[Tuple[str, ...]] = ("mail_chimp_id",)
    VALIDATION_RULES: ClassVar[Dict[str, str]] = {}

    mail_chimp_id: Optional[str] = None
    version: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.WRITE_ONCE:
            current = getattr(self, name, None)
            if current is not None and value != current:
                raise AttributeError(f"{type(self).__name__}.{name} is already set")
        super().__setattr__(name, value)

    @classmethod
    def fillable(cls, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return {k: v for k, v in (data or {}).items() if k in cls.FILLABLE}

    def fill(self, data: Optional[Mapping[str, Any]]) -> "MailChimpEntity":
        for key, value in self.fillable(data).items():
            setattr(self, key, value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Every declared attribute, snake-case keyed, None included."""
        data = self.model_dump(exclude={"version"})
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.strftime(DATE_FORMAT)
        return data

    def to_mailchimp_payload(self) -> Dict[str, Any]:
        """Request body for the MailChimp API: business fields only, nulls dropped."""
        data = self.to_dict()
        return {k: data[k] for k in self.FILLABLE if data.get(k) is not None}
