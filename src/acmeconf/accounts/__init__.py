"""
Account management - account record persistence and presentation.
"""

from acmeconf.accounts.models import AccountRecord, LocalAccount
from acmeconf.accounts.store import read_account, write_account
from acmeconf.accounts.presenter import acceptance_status, render_account

__all__ = [
    "AccountRecord",
    "LocalAccount",
    "read_account",
    "write_account",
    "acceptance_status",
    "render_account",
]
