from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError, ValidationInfo, ValidatorFunctionWrapHandler, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class LenientRecord(BaseModel):
    """Base for records owned by other subsystems (workouts, profiles, form state).

    Keys may arrive in camelCase or snake_case. A field whose value does not
    parse is set to None instead of rejecting the record, so one bad value
    never takes a whole list down with it. Subclass fields must be Optional.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
    }

    @field_validator("*", mode="wrap")
    @classmethod
    def _drop_unparseable(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug("Dropping unparseable %s.%s=%r", cls.__name__, info.field_name, value)
            return None
