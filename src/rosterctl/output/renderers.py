"""Operation-specific Rich renderers for ServiceResult.

Renderers are picked by ``result.op`` in :func:`render_result`; unknown ops
fall back to a plain key-value listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rosterctl.output.console import create_console, get_output, style_for_gender

if TYPE_CHECKING:
    from rich.console import Console

    from rosterctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* to text; plain (no ANSI) when not on a terminal."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: one id per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    rows = result.data.get("people") or result.data.get("items")
    if rows and isinstance(rows, list):
        return "\n".join(str(row["id"]) for row in rows if isinstance(row, dict) and "id" in row)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="roster.ok"), Text(f"  {result.op}", style="roster.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="roster.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"

    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="roster.error"),
        Text(f"  {result.op}", style="roster.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Roster renderers ──────────────────────────────────────────────────


def _people_table(people: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="roster.id", justify="right", no_wrap=True)
    table.add_column("Name", style="roster.name")
    table.add_column("Gender")
    table.add_column("Birth date", no_wrap=True)
    table.add_column("Department", style="roster.department")
    table.add_column("Salary", style="roster.salary", justify="right")

    for person in people:
        gender = str(person.get("gender", ""))
        table.add_row(
            str(person.get("id", "")),
            Text(str(person.get("name", ""))),
            Text(gender, style=style_for_gender(gender)),
            str(person.get("birth_date", "")),
            Text(f"{person.get('department', '')} (#{person.get('department_id', '?')})"),
            f"{float(person.get('salary', 0.0)):.2f}",
        )
    return table


def _render_people(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render load_people: optional people table, then the two summary counts."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d.get("source", ""))

    people = d.get("people")
    if people:
        console.print()
        console.print(_people_table(people))

    console.print()
    console.print(f"Loaded people: {d.get('count', 0)}")
    console.print(f"Unique departments: {d.get('department_count', 0)}")
    if verbose:
        _render_meta(console, result)


def _render_departments(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_departments in first-seen order."""
    d = result.data
    _status_line(console, result)
    _field(console, "source", d.get("source", ""))

    items = d.get("items", [])
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("ID", style="roster.id", justify="right", no_wrap=True)
        table.add_column("Department", style="roster.department")
        table.add_column("Headcount", justify="right")
        for item in items:
            table.add_row(str(item["id"]), Text(str(item["name"])), str(item["headcount"]))
        console.print()
        console.print(table)

    console.print(f"\n{d.get('count', len(items))} departments")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "load_people": _render_people,
    "list_departments": _render_departments,
}
