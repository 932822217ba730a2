"""Helpers for raising Typer parameter errors."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param_hint: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter` for ``param_hint``.

    When ``cause`` is given its message is appended and it becomes the
    exception's ``__cause__``.
    """

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    if cause is not None:
        message = f"{message}: {cause}"
    raise typer.BadParameter(message, **kwargs) from cause
