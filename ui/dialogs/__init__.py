from .help_dialog import HelpDialog
from .about_dialog import AboutDialog

__all__ = [
    "HelpDialog",
    "AboutDialog",
]
