from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .credentials import REQUIRED_SIGNING_KEYS


class SigningGateError(RuntimeError):
    """Fatal packaging-time failure: no release artifact may be produced."""


class SigningConfigIncomplete(SigningGateError):
    def __init__(self, *, missing_keys: Sequence[str], properties_path: Path, file_exists: bool) -> None:
        self.missing_keys = list(missing_keys)
        self.properties_path = properties_path
        self.file_exists = file_exists

        lines = [
            "Release signing is required for production builds.",
            f"Missing configuration in {properties_path}"
            + ("." if file_exists else " (file not found)."),
            f"Missing keys: {', '.join(self.missing_keys)}",
            f"Required keys: {', '.join(REQUIRED_SIGNING_KEYS)}",
            "Use the same signing key as your installed production app for in-place updates;",
            "a package signed with a different key cannot be installed over the existing app.",
        ]
        super().__init__("\n".join(lines))


class SigningConfigUnreadable(SigningGateError):
    def __init__(self, properties_path: Path, reason: str) -> None:
        self.properties_path = properties_path
        super().__init__(f"Cannot read signing configuration {properties_path}: {reason}")


class KeystoreNotFound(SigningGateError):
    def __init__(self, resolved_path: Path) -> None:
        self.resolved_path = resolved_path
        super().__init__(f"Release keystore not found: {resolved_path}")


class InstallError(Exception):
    """Raised inside the installer; converted to an InstallResult at the call boundary."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)
