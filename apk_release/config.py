from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .lib.tasks import DEFAULT_RELEASE_MARKERS

DEFAULT_CONFIG_NAME = "apk_release.yaml"
DEFAULT_PROPERTIES_FILE = "key.properties"
DEFAULT_AUTHORITY_SUFFIX = ".fileprovider"
DEFAULT_MIN_SCOPED_SDK = 24  # Android 7.0 (N)
APK_MIME_TYPE = "application/vnd.android.package-archive"


@dataclass(frozen=True)
class ReleaseConfig:
    raw: Dict[str, Any]

    @property
    def _signing(self) -> Dict[str, Any]:
        return self.raw.get("signing") or {}

    @property
    def _installer(self) -> Dict[str, Any]:
        return self.raw.get("installer") or {}

    @property
    def properties_file(self) -> str:
        return str(self._signing.get("properties_file") or DEFAULT_PROPERTIES_FILE)

    @property
    def release_markers(self) -> List[str]:
        return [str(m) for m in (self._signing.get("release_markers") or DEFAULT_RELEASE_MARKERS)]

    @property
    def release_variants(self) -> List[str]:
        return [str(v) for v in (self._signing.get("release_variants") or ["release"])]

    @property
    def release_signing_mandatory(self) -> bool:
        value = self._signing.get("release_signing_mandatory")
        return True if value is None else bool(value)

    @property
    def package_name(self) -> Optional[str]:
        value = self._installer.get("package_name")
        return str(value) if value else None

    @property
    def authority_suffix(self) -> str:
        return str(self._installer.get("authority_suffix") or DEFAULT_AUTHORITY_SUFFIX)

    @property
    def shared_roots(self) -> Dict[str, str]:
        return {str(k): str(v) for k, v in (self._installer.get("shared_roots") or {}).items()}

    @property
    def mime_type(self) -> str:
        return str(self._installer.get("mime_type") or APK_MIME_TYPE)

    @property
    def min_scoped_sdk(self) -> int:
        return int(self._installer.get("min_scoped_sdk") or DEFAULT_MIN_SCOPED_SDK)

    def with_section(self, section: str, **values: Any) -> "ReleaseConfig":
        """Return a copy with ``values`` merged into ``raw[section]``."""
        raw = dict(self.raw)
        raw[section] = {**(raw.get(section) or {}), **values}
        return ReleaseConfig(raw=raw)


def load_release_config(path: str | None = None, *, project_root: str | Path = ".") -> ReleaseConfig:
    """Load ``apk_release.yaml``.

    An explicit ``path`` must exist. Without one, the default file under
    ``project_root`` is used when present, otherwise built-in defaults apply.
    """
    if path is None:
        p = Path(project_root) / DEFAULT_CONFIG_NAME
        if not p.exists():
            return ReleaseConfig(raw={})
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("release config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML is required to read apk_release.yaml") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p.name} must contain a mapping/object")

    return ReleaseConfig(raw=raw)
