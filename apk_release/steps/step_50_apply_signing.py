from __future__ import annotations

import logging
from typing import Any, Dict

from ..models import DEBUG_IDENTITY, SigningIdentity
from ..pipeline import GateCtx
from ..state_store import record_decision

logger = logging.getLogger(__name__)


class ApplySigningStep:
    step_id = "50_apply_signing"

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        decision = state["decision"]
        fallback = ((state.get("execution") or {}).get("decisions") or {}).get("fallback")

        if decision.configured:
            creds = state["credentials"]
            identity = SigningIdentity(
                name="release",
                store_file=state["keystore"],
                store_password=creds.get("storePassword"),
                key_alias=creds.get("keyAlias"),
                key_password=creds.get("keyPassword"),
            )
        elif fallback == "debug":
            identity = DEBUG_IDENTITY
        else:
            logger.info("No release signing configured; continuing unsigned (%s build)", decision.kind.value)
            state["signing"] = {}
            record_decision(state, "signed_variants", [])
            return state

        # One identity for every release-type variant.
        signing = {variant: identity for variant in ctx.cfg.release_variants}
        state["signing"] = signing
        record_decision(state, "signed_variants", sorted(signing))

        logger.info(
            "Signing variants %s with %s identity (alias=%s)",
            ", ".join(sorted(signing)),
            identity.name,
            identity.key_alias,
        )
        return state
