from .document import HostDocument, MountPoint, MountPointNotFoundError
from .forms import SubmitEvent, normalize_event_date, read_new_event
from .html import to_html
from .nodes import Action, ViewNode, h
from .regions import build_app

__all__ = [
    "Action",
    "HostDocument",
    "MountPoint",
    "MountPointNotFoundError",
    "SubmitEvent",
    "ViewNode",
    "build_app",
    "h",
    "normalize_event_date",
    "read_new_event",
    "to_html",
]
