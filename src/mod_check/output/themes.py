"""Update status color map."""

from mod_check.models import UpdateStatus
from mod_check.models.version import Version

STATUS_COLORS: dict[UpdateStatus, str] = {
    UpdateStatus.PATCH: "green",
    UpdateStatus.MINOR: "yellow",
    UpdateStatus.MAJOR: "red",
}

PATH_STYLE = "cyan"
CURRENT_STYLE = "blue"


def styled_version(version: Version) -> str:
    color = STATUS_COLORS.get(version.status, "blue")
    return f"[{color}]{version.original}[/{color}]"
