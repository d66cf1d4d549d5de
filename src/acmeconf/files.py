"""
Owner-only file and directory helpers.

Permissions are applied when the file is created, so secret material is
never visible to other users, not even briefly.
"""

import os
from pathlib import Path
from typing import Union

import structlog

from acmeconf.errors import NotFoundError

logger = structlog.get_logger()

CONFIG_DIR_MODE = 0o700
PRIVATE_FILE_MODE = 0o600


def read_file(path: Union[str, Path]) -> bytes:
    """Read a whole file, raising NotFoundError when it is absent."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise NotFoundError(path) from e


def ensure_config_dir(path: Union[str, Path]) -> Path:
    """
    Create the config directory and any missing parents with mode 0700.

    Existing directories are left as they are.
    """
    path = Path(path)

    # Parents created here get 0700 too, unlike os.makedirs
    missing = []
    current = path
    while not current.exists() and current != current.parent:
        missing.append(current)
        current = current.parent

    for directory in reversed(missing):
        try:
            os.mkdir(directory, CONFIG_DIR_MODE)
        except FileExistsError:
            pass

    if not path.is_dir():
        raise NotADirectoryError(f"{path} is not a directory")

    if missing:
        logger.debug("config_dir_created", path=str(path))
    return path


def write_private_file(path: Union[str, Path], data: bytes) -> None:
    """
    Write data to path, replacing any existing content.

    A new file is created with mode 0600. An existing file keeps its mode.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PRIVATE_FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)

    logger.debug("private_file_written", path=str(path), size=len(data))


__all__ = [
    "CONFIG_DIR_MODE",
    "PRIVATE_FILE_MODE",
    "read_file",
    "ensure_config_dir",
    "write_private_file",
]
