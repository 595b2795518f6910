from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

QUANTITY_DIGITS = 5
_DIGITS_RE = re.compile(r"[0-9]+")


class PhoneCreate(BaseModel):
    """Тело POST /phones. Валидируется только при создании."""
    company: str = Field(..., min_length=1, max_length=255, description="Производитель")
    model: str = Field(..., min_length=1, max_length=255, description="Модель")
    quantity: int = Field(..., description="Количество, ровно 5 цифр")
    price: Decimal = Field(..., ge=Decimal("0.01"), description="Цена за единицу")

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_digits(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            raise ValueError("The quantity field must be an integer.")
        s = str(v).strip()
        if not _DIGITS_RE.fullmatch(s):
            raise ValueError("The quantity field must be an integer.")
        if len(s) != QUANTITY_DIGITS:
            raise ValueError(f"The quantity field must be {QUANTITY_DIGITS} digits.")
        return int(s)


class PhoneOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company: Optional[str] = None
    model: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Тексты ошибок в формате, который ждут клиенты старого API
_MESSAGES = {
    "missing": "The {field} field is required.",
    "string_too_short": "The {field} field is required.",
    "string_type": "The {field} field must be a string.",
    "string_too_long": "The {field} field must not be greater than {max_length} characters.",
    "decimal_parsing": "The {field} field must be a number.",
    "decimal_type": "The {field} field must be a number.",
    "finite_number": "The {field} field must be a number.",
    "greater_than_equal": "The {field} field must be at least {ge}.",
}


def _message(field: str, err: Dict[str, Any]) -> str:
    template = _MESSAGES.get(err["type"])
    if template is not None:
        return template.format(field=field, **err.get("ctx", {}))
    msg = err["msg"]
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


def validation_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """
    ValidationError -> {"field": ["сообщение", ...]}.
    """
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "body"
        errors.setdefault(field, []).append(_message(field, err))
    return errors
