"""Interactive option selection for ELZA."""

from elza.ui.menus import resolve_options, select_option
from elza.ui.prompts import custom_style, prompt_select

__all__ = [
    "custom_style",
    "prompt_select",
    "resolve_options",
    "select_option",
]
