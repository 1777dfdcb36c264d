from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from urllib.parse import quote


class UnsharedPathError(ValueError):
    pass


def _norm(path: str) -> str:
    return posixpath.normpath(path)


@dataclass(frozen=True)
class FileProvider:
    """Maps device files to ``content://`` URIs under one sharing authority.

    ``roots`` mirrors the app's file-paths declaration: each name exposes one
    directory. Files outside every root cannot be shared.
    """

    authority: str
    roots: Dict[str, str] = field(default_factory=dict)

    def _best_root(self, target: str) -> Optional[Tuple[str, str]]:
        best: Optional[Tuple[str, str]] = None
        for name, directory in self.roots.items():
            root = _norm(directory)
            if target != root and not target.startswith(root.rstrip("/") + "/"):
                continue
            if best is None or len(root) > len(best[1]):
                best = (name, root)
        return best

    def uri_for_file(self, path: str) -> str:
        target = _norm(path)
        match = self._best_root(target)
        if match is None:
            raise UnsharedPathError(f"Failed to find configured root that contains {target}")

        name, root = match
        rel = target[len(root):].lstrip("/")
        return f"content://{self.authority}/{quote(name, safe='')}/{quote(rel, safe='/')}"


def file_uri(path: str) -> str:
    return "file://" + quote(_norm(path), safe="/")
