"""Interactive prompts for ELZA.

This module provides the Questionary-based single-choice list used for
every option axis, with consistent styling and cancel handling.
"""

import questionary
from questionary import Style

from elza.utils.errors import UserCancelledError
from elza.utils.logging import log_message

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_select(message: str, labels: list[str], default: int = 0) -> int:
    """Prompt for one item of a list.

    Args:
        message: Question to ask
        labels: Items to choose from, in display order
        default: Index of the preselected item

    Returns:
        Index of the chosen label

    Raises:
        UserCancelledError: If user presses Ctrl+C or dismisses the prompt
    """
    log_message(f"Prompt select: {message}")

    choices = [questionary.Choice(label, value=index) for index, label in enumerate(labels)]

    try:
        result = questionary.select(
            message,
            choices=choices,
            default=choices[default],
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled selection prompt")

        log_message(f"User selected: {labels[result]}")
        return result

    except KeyboardInterrupt as e:
        raise UserCancelledError("User cancelled with Ctrl+C") from e


__all__ = [
    "custom_style",
    "prompt_select",
]
