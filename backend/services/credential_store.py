from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from backend.config import get_settings
from backend.models.credential_model import ClientSecretBundle, Credential

logger = logging.getLogger(__name__)

# Shared by every store instance: they may all point at the same token file.
_write_lock = threading.Lock()


class WriteError(Exception):
    """The token file could not be written."""


class CredentialStore:
    """JSON-file backed cache for the authorized-user grant."""

    def __init__(self, token_path: Path | None = None):
        self.token_path = Path(token_path or get_settings().token_path)

    def load(self) -> Credential | None:
        try:
            return Credential.model_validate(json.loads(self.token_path.read_text(encoding="utf-8")))
        except FileNotFoundError:
            logger.debug("No cached credential at %s", self.token_path)
        except OSError as exc:
            logger.warning("Cached credential at %s is unreadable: %s", self.token_path, exc)
        except ValueError as exc:
            logger.warning("Ignoring corrupt cached credential at %s: %s", self.token_path, exc)
        return None

    def save(self, bundle: ClientSecretBundle, refresh_token: str) -> Credential:
        credential = Credential(
            type="authorized_user",
            client_id=bundle.client_id,
            client_secret=bundle.client_secret,
            refresh_token=refresh_token,
        )
        payload = json.dumps(credential.model_dump())
        with _write_lock:
            try:
                self._replace(payload)
            except OSError as exc:
                raise WriteError(f"Cannot write credential to {self.token_path}") from exc
        logger.info("Saved credential to %s", self.token_path)
        return credential

    def _replace(self, payload: str) -> None:
        directory = self.token_path.parent
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.token_path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.token_path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
