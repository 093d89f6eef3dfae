import math
from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


class WireModel(BaseModel):
    """Base model for records decoded from the wttr.in JSON document.

    wttr.in encodes every number and date as a JSON string. Subclasses declare
    those fields with ``NumberFromString`` / ``DateFromString`` so the string
    is required and converted during validation. Records are immutable and
    unknown keys are dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @staticmethod
    def parse_number(v: Any) -> float:
        """Convert a numeric string to a finite float.

        Args:
            v: Raw JSON value

        Returns:
            float: Parsed value

        Raises:
            ValueError: If the value is not a string or not a finite number
        """
        if not isinstance(v, str):
            raise ValueError(f"expected a numeric string, got {type(v).__name__}")
        if "_" in v:
            raise ValueError(f"{v!r} is not a number")
        try:
            number = float(v)
        except ValueError:
            raise ValueError(f"{v!r} is not a number") from None
        if not math.isfinite(number):
            raise ValueError(f"{v!r} is not a finite number")
        return number

    @staticmethod
    def parse_date(v: Any) -> date:
        """Convert an ISO calendar date string (``YYYY-MM-DD``) to a date.

        Args:
            v: Raw JSON value

        Returns:
            date: Parsed calendar date

        Raises:
            ValueError: If the value is not a string or not a valid date
        """
        if not isinstance(v, str):
            raise ValueError(f"expected a date string, got {type(v).__name__}")
        try:
            return date.fromisoformat(v)
        except ValueError:
            raise ValueError(f"{v!r} is not a valid date") from None


NumberFromString = Annotated[float, BeforeValidator(WireModel.parse_number)]
DateFromString = Annotated[date, BeforeValidator(WireModel.parse_date)]
