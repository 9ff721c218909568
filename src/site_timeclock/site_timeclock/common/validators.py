from __future__ import annotations

import re
from urllib.parse import urlparse

from ..core.exceptions import ValidationError

_TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} inválido")
    return value.strip()


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido")
    if number < 0:
        raise ValidationError(f"{field_name} não pode ser negativo")
    return number


def require_time_of_day(value: str, field_name: str) -> str:
    if not value or not _TIME_OF_DAY.match(value.strip()):
        raise ValidationError(f"{field_name} deve estar no formato HH:MM")
    return value.strip()


def require_http_url(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValidationError(f"{field_name} deve ser uma URL http(s)")
    return value


def digits_only(value: str) -> str:
    return "".join(ch for ch in (value or "") if ch.isdigit())
