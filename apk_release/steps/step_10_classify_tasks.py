from __future__ import annotations

import logging
from typing import Any, Dict

from ..pipeline import GateCtx
from ..state_store import record_decision

logger = logging.getLogger(__name__)


class ClassifyTasksStep:
    step_id = "10_classify_tasks"

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        kind = ctx.classifier.classify(ctx.task_names)
        state["classification"] = kind
        record_decision(state, "classification", kind.value)

        logger.info("Requested tasks %s classified as %s", list(ctx.task_names), kind.value)
        return state
