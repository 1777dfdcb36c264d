from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .lib.properties import read_properties

logger = logging.getLogger(__name__)

REQUIRED_SIGNING_KEYS = ("storeFile", "storePassword", "keyAlias", "keyPassword")


@dataclass(frozen=True)
class SigningCredentials:
    """Values read from ``key.properties``. Absent file means no values."""

    source: Path
    exists: bool
    values: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    @property
    def missing_keys(self) -> List[str]:
        return [k for k in REQUIRED_SIGNING_KEYS if not (self.values.get(k) or "").strip()]

    @property
    def configured(self) -> bool:
        return self.exists and not self.missing_keys


def load_signing_credentials(path: Path) -> SigningCredentials:
    if not path.exists():
        logger.info("No signing properties at %s", path)
        return SigningCredentials(source=path, exists=False)

    values = read_properties(path)
    logger.info("Loaded signing properties from %s (keys: %s)", path, sorted(values))
    return SigningCredentials(source=path, exists=True, values=values)
