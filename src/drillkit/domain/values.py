"""Two-variant value type and its processor.

``Value`` is a tagged union discriminated by ``kind``. Processing
dispatches on the tag rather than on the payload's Python type.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

ValueKind = Literal["auto", "text", "number"]


class Text(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    value: str


class Number(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["number"] = "number"
    value: int | float


Value = Annotated[Text | Number, Field(discriminator="kind")]

VALUE_ADAPTER: TypeAdapter[Text | Number] = TypeAdapter(Value)


def process_value(value: Text | Number) -> int | float:
    """Length of a text value, or double a numeric one."""
    if value.kind == "text":
        return len(value.value)
    return value.value * 2


def parse_number(raw: str) -> int | float:
    """Parse *raw* as an int when possible, otherwise as a float."""
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def parse_value(raw: str, kind: ValueKind = "auto") -> Text | Number:
    """Build a tagged value from a raw string.

    ``auto`` picks ``Number`` when *raw* parses as an int or float and
    ``Text`` otherwise.

    Raises:
        ValueError: If *kind* is ``number`` and *raw* is not numeric.
    """
    if kind == "text":
        return Text(value=raw)
    try:
        return Number(value=parse_number(raw))
    except ValueError:
        if kind == "number":
            msg = f"Not a number: {raw!r}"
            raise ValueError(msg) from None
        return Text(value=raw)
