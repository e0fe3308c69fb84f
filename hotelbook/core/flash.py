"""One-time status messages kept in the session until the next render."""

from typing import Dict, List

from starlette.requests import Request

FLASH_KEY = "_flashes"

SUCCESS = "success"
ERROR = "error"


def flash(request: Request, category: str, message: str) -> None:
    """Queue a message for the next rendered page."""
    # Session only notices assignment, not in-place changes to a stored list
    request.session[FLASH_KEY] = [*request.session.get(FLASH_KEY, []), [category, message]]


def pop_flashes(request: Request) -> Dict[str, List[str]]:
    """Remove and return pending messages grouped by category."""
    grouped: Dict[str, List[str]] = {SUCCESS: [], ERROR: []}
    for category, message in request.session.pop(FLASH_KEY, []):
        grouped.setdefault(category, []).append(message)
    return grouped
