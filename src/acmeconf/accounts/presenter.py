"""
Human-readable account summary.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from tabulate import tabulate

from acmeconf.accounts.models import AccountRecord


def acceptance_status(record: AccountRecord) -> str:
    """
    Describe terms acceptance.

    Returns "no" when no terms were agreed, "yes" when the agreed terms are
    the current ones, or the agreed (outdated) terms identifier itself.
    """
    if not record.agreed_terms:
        return "no"
    if record.agreed_terms == record.current_terms:
        return "yes"
    return record.agreed_terms


def render_account(
    record: AccountRecord,
    key_path: Union[str, Path],
    out: Optional[TextIO] = None,
) -> str:
    """
    Render an account as an aligned two-column report.

    Args:
        record: Account to describe
        key_path: Key file path, shown as given
        out: Optional text sink the report is also written to

    Returns:
        The report, without a trailing newline
    """
    rows = [
        ["URI:", record.uri],
        ["Key:", str(key_path)],
        ["Contact:", ", ".join(record.contact)],
        ["Terms:", record.current_terms],
        ["Accepted:", acceptance_status(record)],
    ]
    # TODO: list authorizations and issued certificates once they are tracked locally
    report = tabulate(rows, tablefmt="plain", disable_numparse=True, preserve_whitespace=True)

    if out is not None:
        out.write(report + "\n")
    return report


__all__ = ["acceptance_status", "render_account"]
