"""Display helpers for the status badge."""

from typing import Union

from .models import StatusKind

STATUS_COLORS = {
    StatusKind.OPEN: "green",
    StatusKind.CLOSING_SOON: "yellow",
    StatusKind.CLOSED: "red",
}
UNKNOWN_COLOR = "gray"

OPEN_ICON = "🟢"
CLOSED_ICON = "🔴"


def status_color(status: Union[StatusKind, str]) -> str:
    """Color token for a status; unknown values map to gray."""
    try:
        return STATUS_COLORS[StatusKind(status)]
    except ValueError:
        return UNKNOWN_COLOR


def status_icon(is_open: bool) -> str:
    return OPEN_ICON if is_open else CLOSED_ICON
