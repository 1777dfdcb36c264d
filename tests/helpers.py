from pathlib import Path
from typing import Dict

FULL_PROPERTIES = {
    "storeFile": "keys/upload.jks",
    "storePassword": "store-secret",
    "keyAlias": "upload",
    "keyPassword": "key-secret",
}


def write_properties(path: Path, values: Dict[str, str]) -> Path:
    lines = ["# signing configuration"] + [f"{k}={v}" for k, v in values.items()]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="latin-1")
    return path

APP_FILES = "/data/user/0/com.example.library/files"
