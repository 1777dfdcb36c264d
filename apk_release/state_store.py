"""In-memory gate state.

The gate keeps no state between invocations; each run starts from
``ensure_defaults({})`` and reads its configuration fresh.
"""

from __future__ import annotations

from typing import Any, Dict


def ensure_defaults(state: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys with defaults (without overriding existing values)."""

    state.setdefault("classification", None)
    state.setdefault("credentials", None)
    state.setdefault("decision", None)
    state.setdefault("keystore", None)
    state.setdefault("signing", {})

    exe = state.setdefault("execution", {})
    exe.setdefault("current_step", None)
    exe.setdefault("completed_steps", [])
    exe.setdefault("decisions", {})

    return state


def record_decision(state: Dict[str, Any], key: str, value: Any) -> None:
    state.setdefault("execution", {}).setdefault("decisions", {})[key] = value


def mark_step_completed(state: Dict[str, Any], step_id: str) -> None:
    exe = state.setdefault("execution", {})
    completed = exe.setdefault("completed_steps", [])
    if step_id not in completed:
        completed.append(step_id)
