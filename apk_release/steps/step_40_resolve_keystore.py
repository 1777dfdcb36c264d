from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..errors import KeystoreNotFound
from ..pipeline import GateCtx
from ..state_store import record_decision

logger = logging.getLogger(__name__)


def resolve_store_file(raw: str, project_root: Path) -> Path:
    p = Path(raw)
    return p if p.is_absolute() else project_root / p


class ResolveKeystoreStep:
    step_id = "40_resolve_keystore"

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        decision = state["decision"]
        if not decision.configured:
            logger.info("Signing not configured; keystore resolution skipped")
            return state

        raw = state["credentials"].get("storeFile")
        resolved = resolve_store_file(raw, ctx.project_root)
        if not resolved.is_file():
            raise KeystoreNotFound(resolved)

        state["keystore"] = resolved
        record_decision(state, "keystore", str(resolved))
        logger.info("Release keystore: %s", resolved)
        return state
