# models/session.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Session:
    uid: str
    email: str
    id_token: str = ""
    refresh_token: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["Session"]:
        uid = data.get("uid")
        if not uid:
            return None
        return cls(
            uid=str(uid),
            email=str(data.get("email") or ""),
            id_token=str(data.get("id_token") or ""),
            refresh_token=str(data.get("refresh_token") or ""),
        )


__all__ = ["Session"]
