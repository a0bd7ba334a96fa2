"""Registry login by writing credentials into the project's .npmrc.

npm reads registry credentials from a flat `key=value` file. Logging in is
therefore a local operation: derive the `_auth` token from the configured
username and password, then persist it next to the registry URL.

Two policies are supported:
- merge: keep unrelated keys already in the file and overwrite the ones vpub owns
- replace: delete the file and write only registry, _auth, email and always-auth
"""

import base64
import logging
import os
from enum import StrEnum
from pathlib import Path

from vpub.core.config import RegistryConfig
from vpub.core.errors import CredentialIOError

logger = logging.getLogger(__name__)

AUTH_FILE_MODE = 0o600

AuthRecord = dict[str, str]


class CredentialMode(StrEnum):
    MERGE = "merge"
    REPLACE = "replace"


def build_auth_token(username: str, password: str) -> str:
    """Return base64("<username>:<password>") as npm expects in `_auth`."""
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def parse_auth_file(content: str) -> AuthRecord:
    """Parse `key=value` lines into a mapping.

    Blank lines are skipped. Lines that do not split into exactly two parts
    on `=` are dropped.
    """
    record: AuthRecord = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        parts = line.split("=")
        if len(parts) != 2:
            logger.debug("Ignoring unparseable auth file line: %r", line)
            continue
        record[parts[0].strip()] = parts[1].strip()
    return record


def format_auth_file(record: AuthRecord) -> str:
    """Serialize a mapping as sorted `key=value` lines."""
    return "".join(f"{key}={record[key]}\n" for key in sorted(record))


def read_auth_file(path: Path) -> AuthRecord:
    """Read an existing auth file, or return an empty mapping if absent."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        raise CredentialIOError(f"failed to read {path}: {e}") from e
    return parse_auth_file(content)


def build_auth_record(
    config: RegistryConfig, mode: CredentialMode, existing: AuthRecord
) -> AuthRecord:
    """Compute the auth file contents for the given policy.

    Args:
        config: Registry URL and credentials
        mode: Merge into `existing` or replace it outright
        existing: Current file contents (ignored in replace mode)
    """
    auth_token = build_auth_token(config.username, config.password)

    if mode == CredentialMode.REPLACE:
        return {
            "registry": config.registry_url,
            "_auth": auth_token,
            "email": config.email,
            "always-auth": "true",
        }

    record = dict(existing)
    record["_auth"] = auth_token
    record["username"] = config.username
    record["password"] = config.password
    record["email"] = config.email
    record["always-auth"] = "true"
    record["registry"] = config.registry_url
    return record


def _remove_auth_file(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        raise CredentialIOError(f"failed to remove {path}: {e}") from e


def _write_private(path: Path, content: str) -> None:
    # O_CREAT mode only applies to new files, so chmod covers pre-existing ones
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, AUTH_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(path, AUTH_FILE_MODE)
    except OSError as e:
        raise CredentialIOError(f"failed to write {path}: {e}") from e


def persist_credentials(
    config: RegistryConfig, auth_path: Path, mode: CredentialMode = CredentialMode.MERGE
) -> AuthRecord:
    """Write the registry login into the auth file.

    Partial progress is not rolled back; running again with the same config
    produces the same file.

    Args:
        config: Registry URL and credentials
        auth_path: Location of the project's .npmrc
        mode: Merge with or replace any existing file

    Returns:
        The mapping that was written

    Raises:
        CredentialIOError: If the file cannot be read, removed or written
    """
    if mode == CredentialMode.REPLACE:
        _remove_auth_file(auth_path)
        existing: AuthRecord = {}
    else:
        existing = read_auth_file(auth_path)

    record = build_auth_record(config, mode, existing)
    _write_private(auth_path, format_auth_file(record))
    logger.debug(
        "Wrote auth file: path=%s, mode=%s, keys=%s", auth_path, mode.value, sorted(record)
    )
    return record
