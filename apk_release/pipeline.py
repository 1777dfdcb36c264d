from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Protocol, Sequence, Tuple

from .config import ReleaseConfig
from .lib.tasks import TaskClassifier
from .state_store import mark_step_completed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GateCtx:
    """Inputs for one packaging invocation. Never mutated by steps."""

    cfg: ReleaseConfig
    project_root: Path
    task_names: Tuple[str, ...]

    @property
    def classifier(self) -> TaskClassifier:
        return TaskClassifier(markers=tuple(self.cfg.release_markers))

    @property
    def properties_path(self) -> Path:
        p = Path(self.cfg.properties_file)
        return p if p.is_absolute() else self.project_root / p


class Step(Protocol):
    """A single gate step; reads ctx, records its outcome in state."""

    step_id: str

    def run(self, ctx: GateCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(
    *,
    ctx: GateCtx,
    state: Dict[str, Any],
    steps: Sequence[Step],
) -> PipelineResult:
    """Run steps in order. The first exception aborts the remaining steps."""

    ran: List[str] = []

    for step in steps:
        state.setdefault("execution", {})["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)
        state = step.run(ctx, state)
        mark_step_completed(state, step.step_id)
        ran.append(step.step_id)

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
