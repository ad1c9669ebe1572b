from .base import Action
from .duplicates import DuplicatesAction, find_duplicates
from .factory import create_action, render_report
from .sizes import SizesAction

__all__ = [
    "Action",
    "DuplicatesAction",
    "SizesAction",
    "create_action",
    "find_duplicates",
    "render_report",
]
