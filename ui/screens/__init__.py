from .input_screen import InputScreen
from .display_screen import DisplayScreen

__all__ = [
    "InputScreen",
    "DisplayScreen",
]
