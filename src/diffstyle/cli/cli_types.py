# topmark:header:start
#
#   project      : DiffStyle
#   file         : cli_types.py
#   file_relpath : src/diffstyle/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Click parameter types and CLI-facing enums."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output formats of the ``show``, ``presets`` and ``version`` commands."""

    DEFAULT = "default"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click type accepting the (case-insensitive) values of a string Enum.

    Args:
        enum_cls (type[E]): Enum whose member values are the accepted choices.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def get_metavar(self, param: click.Parameter, *args: object, **kwargs: object) -> str:
        return "[" + "|".join(str(m.value) for m in self.enum_cls) + "]"

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"{value!r} is not one of: {', '.join(self._by_value)}",
                param,
                ctx,
            )
        return member
