"""Custom Click parameter types for drill inputs."""

from __future__ import annotations

from typing import Any

import click

from drillkit.domain.values import parse_number


class NumberParam(click.ParamType):
    """An int or float, keeping integers integral."""

    name = "number"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, (int, float)):
            return value
        try:
            return parse_number(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


class LabelledNumber(click.ParamType):
    """A ``label=number`` pair, e.g. ``"Book A=4.5"``.

    Splits on the last ``=`` so labels may contain one.
    """

    name = "label=number"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, tuple):
            return value
        label, sep, raw = str(value).rpartition("=")
        if not sep or not label.strip():
            self.fail(f"{value!r} is not in label=number form", param, ctx)
        try:
            return label.strip(), parse_number(raw.strip())
        except ValueError:
            self.fail(f"{raw!r} in {value!r} is not a number", param, ctx)


NUMBER = NumberParam()
LABELLED_NUMBER = LabelledNumber()
