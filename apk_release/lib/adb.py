from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .command import run_cmd
from .file_provider import FileProvider
from .intents import Intent

logger = logging.getLogger(__name__)


@dataclass
class AdbHost:
    """Host platform reached through ``adb`` on a workstation.

    Paths are device paths. ``providers`` stands in for the sharing
    authorities the installed app declares.

    The readability check and the activity start run as the app through
    ``run-as`` (the app must be debuggable): app-private files are not
    readable by the adb shell user, and only the app that owns a
    non-exported provider can grant read access on its content URIs.
    With ``run_as=False`` commands run as the shell user, which only works
    for world-readable files on the direct file-URI tier.
    """

    package_name: str
    providers: Dict[str, FileProvider] = field(default_factory=dict)
    serial: Optional[str] = None
    adb: str = "adb"
    dry_run: bool = False
    sdk_override: Optional[int] = None
    run_as: bool = True
    _sdk_cache: Optional[int] = field(default=None, init=False, repr=False)

    def _argv(self, *args: str) -> List[str]:
        argv = [self.adb]
        if self.serial:
            argv += ["-s", self.serial]
        return argv + list(args)

    def _shell(self, args: List[str], *, check: bool = True):
        # adb joins shell arguments into a single device-side command line.
        return run_cmd(
            self._argv("shell", " ".join(shlex.quote(a) for a in args)),
            check=check,
            dry_run=self.dry_run,
        )

    def _app_shell(self, args: List[str], *, check: bool = True):
        if self.run_as:
            args = ["run-as", self.package_name] + list(args)
        return self._shell(args, check=check)

    @property
    def sdk_int(self) -> int:
        if self.sdk_override is not None:
            return self.sdk_override
        if self._sdk_cache is None:
            if self.dry_run:
                raise RuntimeError("dry run needs an explicit SDK level")
            out = self._shell(["getprop", "ro.build.version.sdk"]).stdout.strip()
            try:
                self._sdk_cache = int(out)
            except ValueError as e:
                raise RuntimeError(f"Unexpected SDK level from device: {out!r}") from e
            logger.info("Device SDK level: %s", self._sdk_cache)
        return self._sdk_cache

    def is_readable(self, path: str) -> bool:
        return self._app_shell(["test", "-r", path], check=False).ok

    def uri_for_file(self, authority: str, path: str) -> str:
        provider = self.providers.get(authority)
        if provider is None:
            raise LookupError(f"No file provider registered for authority {authority}")
        return provider.uri_for_file(path)

    def start_activity(self, intent: Intent) -> None:
        res = self._app_shell(intent.am_start_args())
        # am reports resolution failures on stdout with exit status 0.
        for line in (res.stdout or "").splitlines():
            if line.startswith("Error"):
                raise RuntimeError(f"Activity start failed: {line.strip()}")
