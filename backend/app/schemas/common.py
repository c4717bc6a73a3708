"""Shared schema plumbing — camelCase wire names and strict ISO dates.

Invariants:
    - Every schema accepts both weekStart and week_start on input, emits weekStart
    - IsoDate accepts only "YYYY-MM-DD" strings (no timestamps, no datetimes)
"""

import re
from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _require_iso_date_string(v: Any) -> Any:
    if isinstance(v, date):
        return v
    if not isinstance(v, str) or not _ISO_DATE.match(v):
        raise ValueError("must be a date string in YYYY-MM-DD format")
    return v


IsoDate = Annotated[date, BeforeValidator(_require_iso_date_string)]


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
