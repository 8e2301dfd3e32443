from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Credential(BaseModel):
    """Authorized-user grant, in the shape google-auth reads back from disk."""

    model_config = ConfigDict(frozen=True)

    type: Literal["authorized_user"]
    client_id: str
    client_secret: str
    refresh_token: str


class ClientSecretBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str

    @classmethod
    def from_file(cls, path: Path) -> ClientSecretBundle:
        """Read the OAuth client file downloaded from the Google Cloud console.

        Desktop clients keep their keys under ``installed``, web clients under
        ``web``. Raises ``OSError`` or ``ValueError`` when the file cannot be
        used.
        """
        keys = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(keys, dict):
            raise ValueError(f"{path} does not contain a JSON object")
        key = keys.get("installed") or keys.get("web")
        if not key:
            raise ValueError(f"{path} has neither an 'installed' nor a 'web' client")
        return cls.model_validate(key)
