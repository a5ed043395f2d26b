"""Field Validation Engine — evaluates a payload against an ordered rule set.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every rule is evaluated (no short-circuit across rules)
    - A failing rule contributes exactly one message: its first failing check
    - Violation order == rule declaration order; no dedup

Design Decisions:
    - Rules are data (FieldRule) and predicates are plain callables, so one
      evaluator handles every resource type (ADR: no per-schema validators)
    - Return a list (not an exception): callers decide when to reject,
      which lets update check existence before looking at violations
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from courses_api.core.domain_types import Presence
from courses_api.core.errors import ValidationFailedError


Predicate = Callable[[Any], bool]

_ALPHA = re.compile(r"[A-Za-z]+")
_INT_NO_LEADING_ZERO = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class Check:
    """A content predicate paired with the message reported when it fails."""
    predicate: Predicate
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Presence requirement plus ordered content checks for one payload key."""
    field: str
    presence: Presence
    missing_message: str = ""
    checks: tuple[Check, ...] = ()


# ─── Predicates ──────────────────────────────────────────────────

def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_alpha(value: Any) -> bool:
    return isinstance(value, str) and _ALPHA.fullmatch(value) is not None


def is_email(value: Any) -> bool:
    """Syntax-only email check (no DNS / deliverability lookups)."""
    if not isinstance(value, str):
        return False
    try:
        validate_email(value)
    except PydanticCustomError:
        return False
    return True


def is_non_negative_int(value: Any) -> bool:
    """Integer (JSON number or digit string) with no sign and no leading zero."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, str):
        return _INT_NO_LEADING_ZERO.fullmatch(value) is not None
    return False


# ─── Evaluation ──────────────────────────────────────────────────

def is_missing(payload: Mapping[str, Any], key: str) -> bool:
    """Absent, null, or falsy ("" / 0 / False / empty container)."""
    return not payload.get(key)


def evaluate_rule(rule: FieldRule, payload: Mapping[str, Any]) -> str | None:
    """Return the rule's first failing message, or None if it passes."""
    if rule.presence is Presence.REQUIRED:
        if is_missing(payload, rule.field):
            return rule.missing_message
    elif rule.field not in payload:
        return None
    value = payload[rule.field]
    for check in rule.checks:
        if not check.predicate(value):
            return check.message
    return None


def collect_violations(
    payload: Mapping[str, Any], rules: tuple[FieldRule, ...],
) -> list[str]:
    """Evaluate every rule in order and return all violation messages."""
    violations = []
    for rule in rules:
        message = evaluate_rule(rule, payload)
        if message is not None:
            violations.append(message)
    return violations


def check_payload(
    payload: Mapping[str, Any], rules: tuple[FieldRule, ...],
) -> ValidationFailedError | None:
    """ValidationFailedError carrying every violation, or None when clean."""
    violations = collect_violations(payload, rules)
    if violations:
        return ValidationFailedError(violations)
    return None
