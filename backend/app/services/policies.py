from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable
from typing import Any, Literal

from app.core.config import get_settings
from app.schemas.entities import PolicyRecord, safe_bool, safe_number
from app.services.conflict_service import ConflictOptions

logger = logging.getLogger(__name__)

PolicyType = Literal["number", "boolean", "text", "json"]


def infer_policy_type(raw: str) -> PolicyType:
    stripped = raw.strip()
    if stripped.startswith("{") or stripped.startswith("["):
        return "json"
    if stripped in {"true", "false"}:
        return "boolean"
    if stripped:
        try:
            if math.isfinite(float(stripped)):
                return "number"
        except ValueError:
            pass
    return "text"


def parse_policy_value(raw: str | None) -> Any:
    value = raw or ""
    kind = infer_policy_type(value)
    if kind == "json":
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Policy value looks like JSON but does not parse; keeping raw text")
            return value
    if kind == "boolean":
        return value.strip() == "true"
    if kind == "number":
        number = float(value)
        return int(number) if number.is_integer() else number
    return value


def resolve_policies(policies: Iterable[PolicyRecord], term_id: str | None) -> dict[str, Any]:
    """Merge global policies with the term's own; term values win."""
    global_term_id = get_settings().global_policy_term_id
    global_values: dict[str, Any] = {}
    term_values: dict[str, Any] = {}
    for policy in policies:
        if not policy.key:
            continue
        if policy.term_id == global_term_id:
            global_values[policy.key] = parse_policy_value(policy.value)
        elif term_id and policy.term_id == term_id:
            term_values[policy.key] = parse_policy_value(policy.value)
    return {**global_values, **term_values}


def conflict_options_from_policies(values: dict[str, Any]) -> ConflictOptions:
    return ConflictOptions(
        allow_room_conflict=safe_bool(values.get("allow_room_conflict")),
        allow_faculty_conflict=safe_bool(values.get("allow_faculty_conflict")),
        allow_section_conflict=safe_bool(values.get("allow_section_conflict")),
        grace_minutes=max(0, int(safe_number(values.get("conflict_grace_minutes")))),
    )
