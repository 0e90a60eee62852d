"""Output formatters for dashboard views."""

import json
from dataclasses import asdict
from datetime import date, datetime
from enum import Enum

from weatherdash.models.view import DashboardView, DaySlot, RenderModel, Slot


def slot_key(slot: Slot) -> str:
    """'current' or 'day:<index>'."""
    if isinstance(slot, DaySlot):
        return f"day:{slot.index}"
    return "current"


def view_to_dict(view: DashboardView) -> dict:
    """JSON-ready dict for the HTTP adapter and `--json` output."""
    if view.render is None:
        return {"status": view.status or "", "render": None}
    data = asdict(view.render)
    data["slot"] = slot_key(view.render.slot)
    return {"status": None, "render": _jsonable(data)}


def format_view_json(view: DashboardView) -> str:
    return json.dumps(view_to_dict(view), indent=2)


def format_view_text(view: DashboardView) -> str:
    """Plain text rendering for the terminal."""
    if view.render is None:
        return f"... {view.status or 'Loading...'}"
    r = view.render
    lines = [
        f"=== {r.location_name} ===",
        r.date_label,
        f"{r.condition} | {_format_temperature(r)} | theme: {r.theme}",
        f"Precip: {r.precipitation} | Humidity: {r.humidity} | "
        f"Wind: {r.wind} | UV: {r.uv_index}",
    ]
    if r.hourly:
        lines.append("Hourly:")
        lines.append(
            "  " + "  ".join(f"{h.label} {h.temperature}°" for h in r.hourly)
        )
    if r.days:
        lines.append("Daily:")
        for d in r.days:
            marker = ">" if d.selected else " "
            precip = f" {d.precip_probability}" if d.show_precip else ""
            lines.append(
                f" {marker}{d.index:>2} {d.name:<10} {d.condition:<14} "
                f"{d.high}° / {d.low}°{precip}"
            )
    return "\n".join(lines)


def _format_temperature(r: RenderModel) -> str:
    if r.temperature_range is not None:
        return f"{r.temperature_range.high}° / {r.temperature_range.low}"
    glyph = "°" if r.show_degree_glyph else ""
    return f"{r.temperature}{glyph}"


def _jsonable(value):
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value
