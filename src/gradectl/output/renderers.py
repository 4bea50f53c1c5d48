"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gradectl.output.console import create_console, get_output, style_for_letter

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from gradectl.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, decimals: int = 1) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, decimals=decimals)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "evaluate":
        return str(result.data.get("letter", ""))
    if result.op == "evaluate_batch":
        return "\n".join(
            str(item.get("letter", "INVALID")) for item in result.data.get("items", [])
        )
    if result.op == "scale":
        return "\n".join(str(band["grade"]) for band in result.data.get("bands", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="grade.ok")
    op = Text(f"  {result.op}", style="grade.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="grade.key")
    if key in ("letter", "grade"):
        v = Text(str(value), style=style_for_letter(str(value)))
    elif key == "score":
        v = Text(str(value), style="grade.score")
    elif key in ("title", "summary"):
        v = Text(str(value), style="grade.title")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _fmt_score(value: Any, decimals: int) -> str:
    if isinstance(value, (int, float)):
        return f"{float(value):.{decimals}f}"
    return str(value)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    if not result.warnings:
        return
    console.print()
    for warning in result.warnings:
        console.print(Text.assemble(Text("  warning: ", style="grade.warning"), warning))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimals: int = 1
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_evaluate(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimals: int = 1
) -> None:
    data = result.data
    letter = str(data.get("letter", ""))
    _status_line(console, result)
    _field(console, "score", _fmt_score(data.get("score"), decimals))
    _field(console, "letter", letter)
    _field(console, "message", data.get("message", ""))


def _render_evaluate_batch(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimals: int = 1
) -> None:
    data = result.data
    _status_line(console, result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Score", style="grade.score", justify="right")
    table.add_column("Grade", no_wrap=True)
    table.add_column("Message")
    for item in data.get("items", []):
        letter = item.get("letter")
        if letter is None:
            grade = Text("—", style="grade.error")
            message = Text(str(item.get("reason", "")), style="grade.error")
        else:
            grade = Text(str(letter), style=style_for_letter(str(letter)))
            message = Text(str(item.get("message", "")))
        table.add_row(_fmt_score(item.get("score"), decimals), grade, message)
    console.print(table)

    console.print()
    _field(console, "count", data.get("count", 0))
    _field(console, "valid", data.get("valid", 0))
    _field(console, "invalid", data.get("invalid", 0))
    distribution = data.get("distribution", {})
    summary = Text("  distribution: ", style="grade.key")
    for index, (letter, count) in enumerate(distribution.items()):
        if index:
            summary.append("  ")
        summary.append(f"{letter}={count}", style=style_for_letter(letter))
    console.print(summary)

    if verbose:
        _render_warnings(console, result)


def _render_scale(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimals: int = 1
) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Grade", no_wrap=True)
    table.add_column("Range", justify="right")
    table.add_column("Message")
    for band in result.data.get("bands", []):
        close = "]" if band.get("max_inclusive") else ")"
        span = f"[{_fmt_score(band['min'], decimals)}, {_fmt_score(band['max'], decimals)}{close}"
        grade = str(band["grade"])
        table.add_row(
            Text(grade, style=style_for_letter(grade)),
            Text(span),
            Text(str(band.get("message", ""))),
        )
    console.print(table)


def _render_catalog_item(
    result: ServiceResult, console: Console, *, verbose: bool = False, decimals: int = 1
) -> None:
    data = result.data
    _status_line(console, result)
    for key in ("summary", "title", "author", "identifier", "page_count", "price"):
        value = data.get(key)
        _field(console, key, "unset" if value is None else value)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="grade.error")
    op = Text(f"  {result.op}", style="grade.op")
    console.print(Text.assemble(label, op, " — ", msg))

    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


_OP_RENDERERS: dict[str, Renderer] = {
    "evaluate": _render_evaluate,
    "evaluate_batch": _render_evaluate_batch,
    "scale": _render_scale,
    "catalog_item": _render_catalog_item,
}
