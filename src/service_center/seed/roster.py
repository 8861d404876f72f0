from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import Credential, Master
from .demo import DEMO_CREDENTIALS, DEMO_MASTERS


def load_roster(path: Optional[str | Path]) -> tuple[Sequence[Credential], Sequence[Master]]:
    """Load credentials and masters from a JSON roster file.

    Expected shape::

        {
          "users":   [{"id": "1", "login": "...", "password": "...", "role": "master", "name": "..."}],
          "masters": [{"id": "1", "name": "...", "login": "master1"}]
        }

    Without a path the demo roster is returned.
    """
    if not path:
        return DEMO_CREDENTIALS, DEMO_MASTERS

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    try:
        credentials = tuple(
            Credential(
                user_id=str(u["id"]),
                login=str(u["login"]),
                password=str(u["password"]),
                role=Role(u["role"]),
                name=str(u["name"]),
            )
            for u in data.get("users", [])
        )
        masters = tuple(
            Master(master_id=str(m["id"]), name=str(m["name"]), login=str(m.get("login", "")))
            for m in data.get("masters", [])
        )
    except (KeyError, ValueError) as e:
        raise ValidationError(f"Некорректный файл справочника {path}: {e}")

    return credentials, masters
