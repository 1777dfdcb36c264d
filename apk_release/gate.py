"""Release signing gate.

Runs before the packaging tool assembles anything. Given the requested task
names it either returns the signing configuration for the release variants
or raises a SigningGateError, which must abort the packaging run.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import ReleaseConfig, load_release_config
from .errors import SigningGateError
from .logging_utils import configure_logging
from .models import SigningDecision, SigningIdentity
from .pipeline import GateCtx, run_pipeline
from .state_store import ensure_defaults
from .steps import (
    ApplySigningStep,
    CheckCredentialsStep,
    ClassifyTasksStep,
    EnforcePolicyStep,
    ResolveKeystoreStep,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GateResult:
    decision: SigningDecision
    signing_configs: Dict[str, SigningIdentity]
    ran_steps: List[str]

    @property
    def signed(self) -> bool:
        return bool(self.signing_configs)

    def to_dict(self, *, show_secrets: bool = False) -> Dict[str, Any]:
        return {
            "decision": self.decision.to_dict(),
            "signing_configs": {
                variant: identity.to_dict(show_secrets=show_secrets)
                for variant, identity in sorted(self.signing_configs.items())
            },
        }


def build_steps():
    return [
        ClassifyTasksStep(),
        CheckCredentialsStep(),
        EnforcePolicyStep(),
        ResolveKeystoreStep(),
        ApplySigningStep(),
    ]


def evaluate_signing(
    task_names: Sequence[str],
    *,
    project_root: str | Path,
    cfg: Optional[ReleaseConfig] = None,
) -> GateResult:
    """Run the gate for one packaging invocation.

    Raises a SigningGateError subclass (incomplete or unreadable
    configuration, missing keystore); all are fatal.
    """

    ctx = GateCtx(
        cfg=cfg or ReleaseConfig(raw={}),
        project_root=Path(project_root).expanduser().absolute(),
        task_names=tuple(task_names),
    )
    result = run_pipeline(ctx=ctx, state=ensure_defaults({}), steps=build_steps())
    state = result.state

    return GateResult(
        decision=state["decision"],
        signing_configs=dict(state.get("signing") or {}),
        ran_steps=result.ran_steps,
    )


def run_gate(
    *,
    task_names: Sequence[str],
    project_root: str,
    config_path: Optional[str],
    log_path: Optional[str] = None,
    allow_debug_signing: bool = False,
) -> GateResult:
    configure_logging(log_path=log_path)

    cfg = load_release_config(config_path, project_root=project_root)
    if allow_debug_signing:
        cfg = cfg.with_section("signing", release_signing_mandatory=False)

    return evaluate_signing(task_names, project_root=project_root, cfg=cfg)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="apk-release-gate")
    p.add_argument("tasks", nargs="*", help="Task names requested for this packaging run")
    p.add_argument("--project-root", default=".", help="Directory key.properties and relative storeFile resolve against")
    p.add_argument("--config", default=None, help="Path to apk_release.yaml")
    p.add_argument("--log", default=None, help="Also write the gate log to this file")
    p.add_argument(
        "--allow-debug-signing",
        action="store_true",
        help="Sign unconfigured release runs with the debug key instead of failing",
    )
    p.add_argument("--show-secrets", action="store_true", help="Include passwords in the JSON output")

    args = p.parse_args(argv)

    try:
        result = run_gate(
            task_names=args.tasks,
            project_root=args.project_root,
            config_path=args.config,
            log_path=args.log,
            allow_debug_signing=bool(args.allow_debug_signing),
        )
    except SigningGateError as e:
        logger.error("%s", e)
        return 1

    sys.stdout.write(json.dumps(result.to_dict(show_secrets=bool(args.show_secrets)), indent=2, sort_keys=True) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
