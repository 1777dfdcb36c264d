from __future__ import annotations

import logging
from typing import Any, Dict

from ..credentials import load_signing_credentials
from ..errors import SigningConfigUnreadable
from ..models import SigningDecision
from ..pipeline import GateCtx
from ..state_store import record_decision

logger = logging.getLogger(__name__)


class CheckCredentialsStep:
    step_id = "20_check_credentials"

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        kind = state.get("classification")
        if kind is None:
            raise RuntimeError("classification missing; run classify step first")

        try:
            creds = load_signing_credentials(ctx.properties_path)
        except (OSError, ValueError) as e:
            raise SigningConfigUnreadable(ctx.properties_path, str(e)) from e

        decision = SigningDecision(
            kind=kind,
            configured=creds.configured,
            missing_keys=tuple(creds.missing_keys),
            properties_path=creds.source,
        )
        state["credentials"] = creds
        state["decision"] = decision
        record_decision(state, "configured", decision.configured)
        record_decision(state, "missing_keys", list(decision.missing_keys))

        if decision.missing_keys:
            logger.info("Signing keys missing: %s", ", ".join(decision.missing_keys))
        return state
