import re
from datetime import UTC, datetime
from typing import Annotated, Any

import pydantic
from pydantic import AfterValidator, Field

from fleet_service.constants.fleet import RULES
from fleet_service.core.exceptions import ValidationError

_NAME_RE = re.compile(RULES.name_pattern)


def utcnow() -> datetime:
    return datetime.now(UTC)


def check_name(value: str) -> str:
    """Trim a name or slug and check its length and charset."""
    value = value.strip()
    if len(value) < RULES.name_min_length:
        raise ValueError(
            f"must contain at least {RULES.name_min_length} characters besides surrounding spaces"
        )
    if len(value) > RULES.name_max_length:
        raise ValueError(f"must contain at most {RULES.name_max_length} characters")
    if not _NAME_RE.match(value):
        raise ValueError("may only contain letters, digits, hyphens and spaces")
    return value


# strict: no str -> number or number -> str coercion, ints are still accepted as numbers.
# JSON bodies may carry NaN and Infinity, which can neither be stored nor rendered back.
Name = Annotated[str, Field(strict=True), AfterValidator(check_name)]
Text = Annotated[str, Field(strict=True, max_length=RULES.text_max_length)]
Number = Annotated[float, Field(strict=True, allow_inf_nan=False)]
PositiveNumber = Annotated[float, Field(strict=True, allow_inf_nan=False, gt=0)]
Longitude = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=-180, le=180)]
Latitude = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=-90, le=90)]


def first_error_message(errors: list[dict[str, Any]]) -> str:
    """Render only the first validation error as ``field.path: message``."""
    if not errors:
        return "invalid input"
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


def validate_record(schema: type[pydantic.BaseModel], data: dict[str, Any]):
    """
    Run a schema over a complete record.

    Returns the validated model, raises ``ValidationError`` describing the first violated rule.
    """
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(first_error_message(e.errors())) from e
