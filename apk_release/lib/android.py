from __future__ import annotations

import logging
import os
from typing import Any, Optional

from .intents import Intent

logger = logging.getLogger(__name__)


class AndroidHost:
    """On-device host for apps packaged with python-for-android.

    Goes through pyjnius to the running activity. Requires the
    ``androidx.core`` FileProvider declared in the app manifest.
    """

    def __init__(self, activity: Optional[Any] = None) -> None:
        try:
            from jnius import autoclass  # type: ignore
        except Exception as e:  # pragma: no cover
            raise RuntimeError(
                "pyjnius is required for on-device installs. "
                "Install the 'android' extra in the app build."
            ) from e

        if activity is None:
            activity = autoclass("org.kivy.android.PythonActivity").mActivity

        self._activity = activity
        self._version = autoclass("android.os.Build$VERSION")
        self._file_provider = autoclass("androidx.core.content.FileProvider")
        self._file = autoclass("java.io.File")
        self._intent = autoclass("android.content.Intent")
        self._uri = autoclass("android.net.Uri")

        logger.info("Android host ready (package=%s, sdk=%s)", self.package_name, self.sdk_int)

    @property
    def sdk_int(self) -> int:
        return int(self._version.SDK_INT)

    @property
    def package_name(self) -> str:
        return str(self._activity.getApplicationContext().getPackageName())

    def is_readable(self, path: str) -> bool:
        readable = os.access(path, os.R_OK)
        if not readable:
            logger.debug("Not readable by the app: %s", path)
        return readable

    def uri_for_file(self, authority: str, path: str) -> str:
        uri = str(self._file_provider.getUriForFile(self._activity, authority, self._file(path)).toString())
        logger.debug("FileProvider %s mapped %s -> %s", authority, path, uri)
        return uri

    def start_activity(self, intent: Intent) -> None:
        j = self._intent(intent.action)
        j.setDataAndType(self._uri.parse(intent.data), intent.mime_type)
        j.setFlags(intent.flags)
        logger.info("startActivity %s data=%s flags=%#x", intent.action, intent.data, intent.flags)
        self._activity.startActivity(j)
