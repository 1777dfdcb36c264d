"""
Shared fixtures for the apk_release test suite.
"""

import logging
from typing import Dict, List, Optional

import pytest

from apk_release.lib.file_provider import FileProvider

from .helpers import APP_FILES


@pytest.fixture(autouse=True)
def reset_root_logging():
    """configure_logging() is once-per-process; undo it between tests."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    for attr in ("_apk_release_configured", "_apk_release_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def project_root(tmp_path):
    root = tmp_path / "android"
    root.mkdir()
    return root


@pytest.fixture
def keystore(project_root):
    p = project_root / "keys" / "upload.jks"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(b"\xfe\xed\xfe\xed")
    return p


class RecordingHost:
    """Host platform double that records reference requests and dispatched intents."""

    def __init__(
        self,
        sdk_int: int,
        *,
        package_name: str = "com.example.library",
        roots: Optional[Dict[str, str]] = None,
        register_provider: bool = True,
        readable: bool = True,
        fail_start: Optional[Exception] = None,
    ) -> None:
        self.sdk_int = sdk_int
        self.package_name = package_name
        self.readable = readable
        self.fail_start = fail_start
        self.providers: Dict[str, FileProvider] = {}
        if register_provider:
            authority = f"{package_name}.fileprovider"
            self.providers[authority] = FileProvider(authority=authority, roots=roots or {"updates": APP_FILES})
        self.readable_checks: List[str] = []
        self.uri_requests: List[tuple] = []
        self.started: List = []

    def is_readable(self, path: str) -> bool:
        self.readable_checks.append(path)
        return self.readable

    def uri_for_file(self, authority: str, path: str) -> str:
        self.uri_requests.append((authority, path))
        provider = self.providers.get(authority)
        if provider is None:
            raise LookupError(f"No file provider registered for authority {authority}")
        return provider.uri_for_file(path)

    def start_activity(self, intent) -> None:
        if self.fail_start is not None:
            raise self.fail_start
        self.started.append(intent)


@pytest.fixture
def make_host():
    return RecordingHost
