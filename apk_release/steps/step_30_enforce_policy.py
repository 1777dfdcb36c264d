from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import SigningConfigIncomplete
from ..models import SigningDecision
from ..pipeline import GateCtx
from ..state_store import record_decision

logger = logging.getLogger(__name__)


class EnforcePolicyStep:
    """Fail fast when a release run has no usable signing configuration."""

    step_id = "30_enforce_policy"

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        decision: SigningDecision = state["decision"]
        creds = state["credentials"]

        if not (decision.required and not decision.configured):
            record_decision(state, "fallback", None)
            return state

        if ctx.cfg.release_signing_mandatory:
            raise SigningConfigIncomplete(
                missing_keys=decision.missing_keys,
                properties_path=decision.properties_path,
                file_exists=creds.exists,
            )

        logger.warning(
            "Release signing not configured (%s); release variants fall back to the debug key. "
            "These packages cannot update an app installed from a production build.",
            decision.properties_path,
        )
        record_decision(state, "fallback", "debug")
        return state
