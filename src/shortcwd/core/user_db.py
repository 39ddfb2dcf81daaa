"""Read home directories from the system user database.

Each call returns a fresh, immutable snapshot. Nothing is cached because
accounts can change between prompt renders.

passwd(5) lines have seven colon-separated fields:

    name:password:uid:gid:gecos:home:shell
"""

import logging
import pwd
from pathlib import Path

from shortcwd.core.lossy import to_display_text
from shortcwd.models.home import HomeRecord

logger = logging.getLogger(__name__)

PASSWD_FIELD_COUNT = 7


def parse_passwd_line(line: str) -> HomeRecord | None:
    """Parse a single passwd line into a HomeRecord.

    Returns:
        The record, or None for blank, comment or malformed lines
    """
    line = line.rstrip("\n")
    if not line or line.startswith("#"):
        return None

    fields = line.split(":")
    if len(fields) != PASSWD_FIELD_COUNT:
        return None

    username, _password, uid_str, _gid, _gecos, home_dir, _shell = fields
    if not username or not home_dir:
        return None

    try:
        uid = int(uid_str)
    except ValueError:
        return None
    if uid < 0:
        return None

    return HomeRecord(username=username, uid=uid, home_dir=home_dir)


def parse_passwd(text: str) -> tuple[HomeRecord, ...]:
    """Parse passwd file contents, skipping lines that are not valid entries."""
    records: list[HomeRecord] = []
    for line in text.splitlines():
        record = parse_passwd_line(line)
        if record is not None:
            records.append(record)
    return tuple(records)


def list_home_records(passwd_file: str | Path | None = None) -> tuple[HomeRecord, ...]:
    """Take a snapshot of every account's home directory.

    Args:
        passwd_file: Read this passwd file instead of the system database.

    Returns:
        All parsable records, or an empty tuple if the source is unreadable.
    """
    if passwd_file is not None:
        path = Path(passwd_file)
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning(f"Cannot read passwd file {path}: {e}")
            return ()
        return parse_passwd(to_display_text(raw))

    try:
        entries = pwd.getpwall()
    except OSError as e:
        logger.warning(f"Cannot enumerate user database: {e}")
        return ()

    records: list[HomeRecord] = []
    for entry in entries:
        if not entry.pw_name or not entry.pw_dir or entry.pw_uid < 0:
            continue
        records.append(
            HomeRecord(
                username=to_display_text(entry.pw_name),
                uid=entry.pw_uid,
                home_dir=entry.pw_dir,
            )
        )
    return tuple(records)
