"""
Tests for the on-device host bridge.

A stand-in ``jnius`` module is installed in sys.modules; the Java classes
are replaced by small recorders.
"""

import logging
import sys
import types

import pytest

from apk_release.installer import UpdateInstaller
from apk_release.lib.android import AndroidHost
from apk_release.lib.intents import ACTION_VIEW, FLAG_ACTIVITY_NEW_TASK, FLAG_GRANT_READ_URI_PERMISSION

PKG = "com.example.library"


class _JavaString:
    def __init__(self, value):
        self.value = value

    def toString(self):
        return self.value


class _Context:
    def getPackageName(self):
        return PKG


class _Activity:
    def __init__(self):
        self.started = []

    def getApplicationContext(self):
        return _Context()

    def startActivity(self, intent):
        self.started.append(intent)


class _JavaIntent:
    def __init__(self, action):
        self.action = action
        self.data = None
        self.mime_type = None
        self.flags = 0

    def setDataAndType(self, data, mime_type):
        self.data = data
        self.mime_type = mime_type

    def setFlags(self, flags):
        self.flags = flags


class _FileProvider:
    @staticmethod
    def getUriForFile(activity, authority, file):
        return _JavaString(f"content://{authority}/updates/{file.split('/')[-1]}")


def _fake_jnius(sdk):
    classes = {
        "android.os.Build$VERSION": types.SimpleNamespace(SDK_INT=sdk),
        "androidx.core.content.FileProvider": _FileProvider,
        "java.io.File": str,
        "android.content.Intent": _JavaIntent,
        "android.net.Uri": types.SimpleNamespace(parse=lambda s: s),
    }
    return types.SimpleNamespace(autoclass=classes.__getitem__)


@pytest.fixture
def android(monkeypatch):
    def make(sdk=30):
        monkeypatch.setitem(sys.modules, "jnius", _fake_jnius(sdk))
        activity = _Activity()
        return AndroidHost(activity=activity), activity

    return make


class TestAndroidHost:
    def test_reports_device_facts(self, android, caplog):
        caplog.set_level(logging.INFO, logger="apk_release.lib.android")
        host, _ = android(sdk=28)

        assert host.sdk_int == 28
        assert host.package_name == PKG
        assert "package=com.example.library, sdk=28" in caplog.text

    def test_scoped_install_starts_activity(self, android, tmp_path, caplog):
        caplog.set_level(logging.INFO, logger="apk_release.lib.android")
        apk = tmp_path / "app.apk"
        apk.write_bytes(b"PK")
        host, activity = android(sdk=30)

        result = UpdateInstaller(host).install_apk(str(apk))

        assert result.ok
        (started,) = activity.started
        assert started.action == ACTION_VIEW
        assert started.data == f"content://{PKG}.fileprovider/updates/app.apk"
        assert started.flags == FLAG_ACTIVITY_NEW_TASK | FLAG_GRANT_READ_URI_PERMISSION
        assert "startActivity android.intent.action.VIEW" in caplog.text

    def test_unreadable_file(self, android, tmp_path):
        host, _ = android()
        assert not host.is_readable(str(tmp_path / "missing.apk"))
