"""
Account config store.

Reads and writes account.json in the config directory. The account key
lives beside it in account.key and is loaded on read, but never written
here; see acmeconf.keys.store.
"""

from pathlib import Path
from typing import Union

from pydantic import ValidationError
import structlog

from acmeconf.accounts.models import AccountRecord, LocalAccount
from acmeconf.config import ACCOUNT_FILE, ACCOUNT_KEY_FILE, same_dir
from acmeconf.errors import AcmeConfError, NotFoundError, ParseError
from acmeconf.files import ensure_config_dir, read_file, write_private_file
from acmeconf.keys.store import load_key

logger = structlog.get_logger()


def read_account(config_dir: Union[str, Path]) -> LocalAccount:
    """
    Read the account record and its key from config_dir.

    A key that cannot be loaded does not fail the read. The account is
    returned without a key; if the key file exists but is unusable the
    error is kept in `LocalAccount.key_error`.

    Args:
        config_dir: Configuration directory

    Returns:
        Account with key attached when available

    Raises:
        NotFoundError: account.json does not exist
        ParseError: account.json is not a valid account record
        OSError: account.json could not be read
    """
    account_path = Path(config_dir) / ACCOUNT_FILE
    data = read_file(account_path)

    try:
        record = AccountRecord.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(f"{account_path}: {e}") from e

    account = LocalAccount(
        record=record,
        key_path=same_dir(account_path, ACCOUNT_KEY_FILE),
    )

    try:
        account.key = load_key(account.key_path)
    except NotFoundError:
        logger.debug("account_key_missing", path=str(account.key_path))
    except (AcmeConfError, OSError) as e:
        account.key_error = e
        logger.warning(
            "account_key_unusable",
            path=str(account.key_path),
            error=str(e),
        )

    return account


def write_account(config_dir: Union[str, Path], record: AccountRecord) -> Path:
    """
    Write the account record to config_dir/account.json.

    The directory is created with mode 0700 if needed, and a new file with
    mode 0600. An existing file is replaced. The key is not written.

    Returns:
        Path of the written file
    """
    data = record.model_dump_json(indent=2).encode("utf-8") + b"\n"

    account_path = ensure_config_dir(config_dir) / ACCOUNT_FILE
    write_private_file(account_path, data)

    logger.info("account_written", path=str(account_path), uri=record.uri)
    return account_path


__all__ = ["read_account", "write_account"]
