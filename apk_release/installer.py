"""Update installer dispatch.

Hands a downloaded package to the platform installer. Success means the
install action was dispatched; the platform UI that follows is user driven
and never awaited here.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from .config import APK_MIME_TYPE, DEFAULT_AUTHORITY_SUFFIX, DEFAULT_MIN_SCOPED_SDK, ReleaseConfig
from .errors import InstallError
from .lib.exposure import FileExposure, select_exposure
from .lib.intents import ACTION_VIEW, FLAG_ACTIVITY_NEW_TASK, Intent

logger = logging.getLogger(__name__)

INSTALL_METHOD = "installApk"

INVALID_PATH = "INVALID_PATH"
INSTALL_FAILED = "INSTALL_FAILED"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


class HostPlatform(Protocol):
    sdk_int: int
    package_name: str

    def is_readable(self, path: str) -> bool:
        ...

    def uri_for_file(self, authority: str, path: str) -> str:
        ...

    def start_activity(self, intent: Intent) -> None:
        ...


@dataclass(frozen=True)
class InstallResult:
    ok: bool
    code: Optional[str] = None
    message: Optional[str] = None
    intent: Optional[Intent] = None

    @classmethod
    def dispatched(cls, intent: Intent) -> "InstallResult":
        return cls(ok=True, intent=intent)

    @classmethod
    def failure(cls, code: str, message: str) -> "InstallResult":
        return cls(ok=False, code=code, message=message)

    def to_dict(self) -> dict:
        out: dict = {"ok": self.ok}
        if self.ok and self.intent is not None:
            out["uri"] = self.intent.data
            out["flags"] = self.intent.flags
        else:
            out["code"] = self.code
            out["message"] = self.message
        return out


class UpdateInstaller:
    def __init__(
        self,
        host: HostPlatform,
        *,
        mime_type: str = APK_MIME_TYPE,
        min_scoped_sdk: int = DEFAULT_MIN_SCOPED_SDK,
        authority_suffix: str = DEFAULT_AUTHORITY_SUFFIX,
    ) -> None:
        self.host = host
        self.mime_type = mime_type
        self.min_scoped_sdk = min_scoped_sdk
        self.authority_suffix = authority_suffix

    @classmethod
    def from_config(cls, host: HostPlatform, cfg: ReleaseConfig) -> "UpdateInstaller":
        return cls(
            host,
            mime_type=cfg.mime_type,
            min_scoped_sdk=cfg.min_scoped_sdk,
            authority_suffix=cfg.authority_suffix,
        )

    def exposure(self) -> FileExposure:
        return select_exposure(
            self.host.sdk_int,
            min_scoped_sdk=self.min_scoped_sdk,
            authority_suffix=self.authority_suffix,
        )

    def build_intent(self, file_path: str) -> Intent:
        if not self.host.is_readable(file_path):
            raise InstallError(INSTALL_FAILED, f"Package file is missing or unreadable: {file_path}")

        exposure = self.exposure()
        exposed = exposure.expose(self.host, file_path)
        logger.info("Exposing %s via %s reference %s", file_path, exposure.tier, exposed.uri)

        return Intent(
            action=ACTION_VIEW,
            data=exposed.uri,
            mime_type=self.mime_type,
            flags=FLAG_ACTIVITY_NEW_TASK | exposed.grant_flags,
        )

    def install_apk(self, file_path: Optional[str]) -> InstallResult:
        if not isinstance(file_path, str) or not file_path.strip():
            return InstallResult.failure(INVALID_PATH, "File path is null or empty")
        if not posixpath.isabs(file_path):
            return InstallResult.failure(INVALID_PATH, f"File path must be absolute: {file_path}")

        try:
            intent = self.build_intent(file_path)
            self.host.start_activity(intent)
        except InstallError as e:
            logger.warning("Install of %s not dispatched: %s", file_path, e.message)
            return InstallResult.failure(e.code, e.message)
        except Exception as e:
            logger.warning("Install of %s not dispatched: %s", file_path, e)
            return InstallResult.failure(INSTALL_FAILED, f"Failed to dispatch install for {file_path}: {e}")

        logger.info("Install dispatched for %s", file_path)
        return InstallResult.dispatched(intent)


def handle_method_call(
    installer: UpdateInstaller,
    method: str,
    arguments: Optional[Mapping[str, Any]] = None,
) -> InstallResult:
    """Entry point for the app's method-call bridge."""
    if method != INSTALL_METHOD:
        return InstallResult.failure(NOT_IMPLEMENTED, f"Method not implemented: {method}")
    return installer.install_apk((arguments or {}).get("filePath"))
