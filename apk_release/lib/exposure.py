"""How a downloaded package is handed to the platform installer.

Android 7.0 (API 24) and later refuse ``file://`` URIs crossing app
boundaries, so the package must go through the app's file-sharing authority
with a transient read grant. Older releases take a plain file URI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..config import DEFAULT_AUTHORITY_SUFFIX, DEFAULT_MIN_SCOPED_SDK
from .file_provider import file_uri
from .intents import FLAG_GRANT_READ_URI_PERMISSION


class ProviderHost(Protocol):
    package_name: str

    def uri_for_file(self, authority: str, path: str) -> str:
        ...


@dataclass(frozen=True)
class ExposedFile:
    uri: str
    grant_flags: int = 0


class FileExposure(Protocol):
    tier: str

    def expose(self, host: ProviderHost, path: str) -> ExposedFile:
        ...


@dataclass(frozen=True)
class ScopedContentExposure:
    authority_suffix: str = DEFAULT_AUTHORITY_SUFFIX
    tier: str = "scoped"

    def authority_for(self, host: ProviderHost) -> str:
        return f"{host.package_name}{self.authority_suffix}"

    def expose(self, host: ProviderHost, path: str) -> ExposedFile:
        uri = host.uri_for_file(self.authority_for(host), path)
        return ExposedFile(uri=uri, grant_flags=FLAG_GRANT_READ_URI_PERMISSION)


@dataclass(frozen=True)
class DirectFileExposure:
    tier: str = "direct"

    def expose(self, host: ProviderHost, path: str) -> ExposedFile:
        return ExposedFile(uri=file_uri(path))


def requires_scoped_access(sdk_int: int, *, min_scoped_sdk: int = DEFAULT_MIN_SCOPED_SDK) -> bool:
    return sdk_int >= min_scoped_sdk


def select_exposure(
    sdk_int: int,
    *,
    min_scoped_sdk: int = DEFAULT_MIN_SCOPED_SDK,
    authority_suffix: str = DEFAULT_AUTHORITY_SUFFIX,
) -> FileExposure:
    if requires_scoped_access(sdk_int, min_scoped_sdk=min_scoped_sdk):
        return ScopedContentExposure(authority_suffix=authority_suffix)
    return DirectFileExposure()
