from __future__ import annotations

from dataclasses import dataclass
from typing import List

ACTION_VIEW = "android.intent.action.VIEW"

FLAG_GRANT_READ_URI_PERMISSION = 0x00000001
FLAG_ACTIVITY_NEW_TASK = 0x10000000


@dataclass(frozen=True)
class Intent:
    action: str
    data: str
    mime_type: str
    flags: int = 0

    def has_flag(self, flag: int) -> bool:
        return (self.flags & flag) == flag

    def am_start_args(self) -> List[str]:
        """Equivalent ``am start`` invocation (used when dispatching over adb)."""
        return [
            "am",
            "start",
            "-a",
            self.action,
            "-d",
            self.data,
            "-t",
            self.mime_type,
            "-f",
            str(self.flags),
        ]
