from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

DEFAULT_RELEASE_MARKERS: Tuple[str, ...] = ("release",)


class BuildKind(str, Enum):
    RELEASE = "release"
    NON_RELEASE = "non_release"


@dataclass(frozen=True)
class TaskClassifier:
    """Decides whether a packaging invocation produces release output.

    The rule follows the packaging tool's task naming convention
    (``assembleRelease``, ``bundleRelease``, ``:app:packageRelease``): a task
    is a release task when its name contains one of ``markers``, compared
    case-insensitively. Subclass or pass other markers to override it.
    """

    markers: Tuple[str, ...] = DEFAULT_RELEASE_MARKERS

    def is_release_task(self, task_name: str) -> bool:
        name = task_name.casefold()
        return any(m.casefold() in name for m in self.markers if m)

    def classify(self, task_names: Iterable[str]) -> BuildKind:
        if any(self.is_release_task(t) for t in task_names):
            return BuildKind.RELEASE
        return BuildKind.NON_RELEASE
