"""Display module for rendering CLI output.

- console: Shared Rich console instance
- InviteRenderer: terminal preview of a rendered invite
"""

from weddings_cli.display.console import console
from weddings_cli.display.invite_renderer import InviteRenderer

__all__ = [
    "console",
    "InviteRenderer",
]
