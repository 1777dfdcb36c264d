from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .lib.tasks import BuildKind

REDACTED = "********"


@dataclass(frozen=True)
class SigningDecision:
    kind: BuildKind
    configured: bool
    missing_keys: Tuple[str, ...]
    properties_path: Path

    @property
    def required(self) -> bool:
        return self.kind is BuildKind.RELEASE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classification": self.kind.value,
            "required": self.required,
            "configured": self.configured,
            "missing_keys": list(self.missing_keys),
            "properties_path": str(self.properties_path),
        }


@dataclass(frozen=True)
class SigningIdentity:
    """Keystore + alias + passwords attached to a build variant.

    ``store_file`` is None for the packaging tool's built-in debug identity.
    """

    name: str
    store_file: Optional[Path] = None
    store_password: Optional[str] = None
    key_alias: Optional[str] = None
    key_password: Optional[str] = None

    @property
    def is_debug(self) -> bool:
        return self.store_file is None

    def to_dict(self, *, show_secrets: bool = False) -> Dict[str, Any]:
        def secret(v: Optional[str]) -> Optional[str]:
            if v is None or show_secrets:
                return v
            return REDACTED

        return {
            "name": self.name,
            "storeFile": str(self.store_file) if self.store_file else None,
            "storePassword": secret(self.store_password),
            "keyAlias": self.key_alias,
            "keyPassword": secret(self.key_password),
        }


DEBUG_IDENTITY = SigningIdentity(name="debug")
