# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Declarative payload validation.

A rule table maps a dotted field path to a ``|``-separated rule string::

    {
        "email_address": "required|email",
        "location.latitude": "nullable|numeric",
    }

Rules for a field only run when the field is present, except ``required``
which is always checked. Nested paths resolve through mappings; when a path
segment meets a list the rules fan out over its elements and errors are keyed
by the concrete path (``marketing_permissions.0.enabled``). A missing parent
container makes the nested field absent.
"""
import ipaddress
import math
import re
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import EmailStr, TypeAdapter, ValidationError

from mailchimp_proxy.core.errors import InvalidDataError

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_EMAIL = TypeAdapter(EmailStr)

NUMERIC_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

_MISSING = object()


class Rule(NamedTuple):
    name: str
    args: Tuple[str, ...] = ()


@lru_cache(maxsize=256)
def parse_rules(rule_string: str) -> Tuple[Rule, ...]:
    rules = []
    for part in rule_string.split("|"):
        part = part.strip()
        if not part:
            continue
        name, _, arg = part.partition(":")
        if name not in _CHECKS and name not in ("required", "nullable"):
            raise ValueError(f"Unknown validation rule '{name}'")
        rules.append(Rule(name, tuple(arg.split(",")) if arg else ()))
    return tuple(rules)


# ── Predicates ─────────────────────────────────────────────────────────────

def _is_empty(value: Any) -> bool:
    if value is _MISSING or value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def _check_string(value, label, args) -> Optional[str]:
    if not isinstance(value, str):
        return f"The {label} must be a string."
    return None


def _check_boolean(value, label, args) -> Optional[str]:
    if value in (True, False, 0, 1, "0", "1") and not isinstance(value, float):
        return None
    return f"The {label} field must be true or false."


def _check_numeric(value, label, args) -> Optional[str]:
    if isinstance(value, bool):
        return f"The {label} must be a number."
    if isinstance(value, int) or (isinstance(value, float) and math.isfinite(value)):
        return None
    # plain decimal or exponent notation only: no nan, inf, underscores or padding
    if isinstance(value, str) and NUMERIC_RE.fullmatch(value):
        return None
    return f"The {label} must be a number."


def _check_array(value, label, args) -> Optional[str]:
    if isinstance(value, (dict, list)):
        return None
    return f"The {label} must be an array."


def _check_email(value, label, args) -> Optional[str]:
    if isinstance(value, str):
        try:
            _EMAIL.validate_python(value)
            return None
        except ValidationError:
            pass
    return f"The {label} must be a valid email address."


def _check_ipv4(value, label, args) -> Optional[str]:
    if isinstance(value, str):
        try:
            ipaddress.IPv4Address(value)
            return None
        except ValueError:
            pass
    return f"The {label} must be a valid IPv4 address."


def _check_date_format(value, label, args) -> Optional[str]:
    fmt = args[0] if args else DATE_FORMAT
    if isinstance(value, str):
        try:
            # strptime tolerates missing zero padding, the stored value would not match
            if datetime.strptime(value, fmt).strftime(fmt) == value:
                return None
        except ValueError:
            pass
    return f"The {label} does not match the format {fmt}."


def _check_in(value, label, args) -> Optional[str]:
    if isinstance(value, str) and value in args:
        return None
    return f"The selected {label} is invalid."


def _check_size(value, label, args) -> Optional[str]:
    size = int(args[0])
    if isinstance(value, str) and len(value) == size:
        return None
    return f"The {label} must be {size} characters."


_CHECKS = {
    "string": _check_string,
    "boolean": _check_boolean,
    "numeric": _check_numeric,
    "array": _check_array,
    "email": _check_email,
    "ipv4": _check_ipv4,
    "date_format": _check_date_format,
    "in": _check_in,
    "size": _check_size,
}


# ── Path resolution ────────────────────────────────────────────────────────

def _join(prefix: str, segment: str) -> str:
    return f"{prefix}.{segment}" if prefix else segment


def _resolve(data: Any, segments: List[str], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """Yield ``(concrete_path, value)`` pairs; value is ``_MISSING`` when absent."""
    head, rest = segments[0], segments[1:]

    if isinstance(data, list):
        if head.isdigit():
            index = int(head)
            if index < len(data):
                yield from _descend(data[index], rest, _join(prefix, head))
            elif not rest:
                yield _join(prefix, head), _MISSING
            return
        # "*" consumes the segment, a field name applies to every element
        remaining = rest if head == "*" else segments
        for index, item in enumerate(data):
            yield from _descend(item, remaining, _join(prefix, str(index)))
        return

    if isinstance(data, Mapping):
        if head in data:
            yield from _descend(data[head], rest, _join(prefix, head))
        elif not rest:
            yield _join(prefix, head), _MISSING


def _descend(value: Any, rest: List[str], path: str) -> Iterator[Tuple[str, Any]]:
    if not rest:
        yield path, value
    elif value is not None:
        yield from _resolve(value, rest, path)


# ── Public API ─────────────────────────────────────────────────────────────

def check_value(path: str, value: Any, rules: Tuple[Rule, ...]) -> List[str]:
    label = path.replace("_", " ")
    names = {rule.name for rule in rules}

    if "required" in names and _is_empty(value):
        return [f"The {label} field is required."]
    if value is _MISSING:
        return []
    if value is None and "nullable" in names:
        return []

    messages = []
    for rule in rules:
        check = _CHECKS.get(rule.name)
        if check is None:
            continue
        message = check(value, label, rule.args)
        if message:
            messages.append(message)
    return messages


def validate(payload: Optional[Mapping[str, Any]], rules: Mapping[str, str],
             partial: bool = False) -> Dict[str, List[str]]:
    """Return ``{path: [messages]}``; an empty dict means the payload is valid.

    With ``partial=True`` only top-level fields present in the payload are
    checked, which is how updates validate the subset they supply.
    """
    payload = payload or {}
    errors: Dict[str, List[str]] = {}
    for path, rule_string in rules.items():
        segments = path.split(".")
        if partial and segments[0] not in payload:
            continue
        parsed = parse_rules(rule_string)
        for concrete, value in _resolve(payload, segments):
            messages = check_value(concrete, value, parsed)
            if messages:
                errors.setdefault(concrete, []).extend(messages)
    return errors


def validate_or_raise(payload: Optional[Mapping[str, Any]], rules: Mapping[str, str],
                      partial: bool = False) -> None:
    errors = validate(payload, rules, partial=partial)
    if errors:
        raise InvalidDataError(errors)
