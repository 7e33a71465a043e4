"""
Untrusted model output -> validated hunt shapes.

extract_json_payload: fenced ```json block or raw text, then json.loads.
coerce_account: per-field defaults and clamping into AccountModel.
build_steps: the canonical 10-step track, only notes are taken from the model.

Nothing here raises except extract_json_payload on unparsable text.
"""
from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List, Optional

from hunting_engine.constants.methodology import (
    FIRST_STEP,
    LAST_STEP,
    METHODOLOGY_STEPS,
    PENDING_NOTE,
    STEPS_BY_NUMBER,
)
from hunting_engine.errors import HuntingServiceError
from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel, IdeaModel, StepModel
from hunting_engine.structured_outputs.hunt_outputs import RawAccount

JSON_FENCE_RE = re.compile(r"```json[ \t]*\r?\n?([\s\S]*?)\r?\n?```", re.IGNORECASE)

DEFAULT_ACCOUNT_NAME = "Unknown"
DEFAULT_SEGMENT = "Unknown"
DEFAULT_STAGE = "Prospect"
MIN_SCORE = 0
MAX_SCORE = 100


def extract_json_text(raw_text: str) -> str:
    match = JSON_FENCE_RE.search(raw_text or "")
    if match:
        return match.group(1)
    return raw_text or ""


def extract_json_payload(raw_text: str) -> Any:
    """
    Parse the JSON carried by a synthesis response.

    Raises:
        HuntingServiceError: the text is not valid JSON (fenced or not).
            The unmodified response is attached as `raw_text`.
    """
    json_text = extract_json_text(raw_text)
    try:
        return json.loads(json_text)
    except (TypeError, ValueError) as e:
        raise HuntingServiceError(
            f"Hunting service error: could not parse synthesis response as JSON ({e})",
            raw_text=raw_text,
        ) from e


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            # JSON integers are unbounded; past float range they clamp like inf
            return math.copysign(math.inf, value)
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def clamp_int(value: Any, lower: int, upper: int, default: int) -> int:
    """Numeric (or numeric string) value rounded and clamped; anything else -> default, then clamped."""
    number = _as_number(value)
    if number is None:
        number = default
    if math.isinf(number):
        return upper if number > 0 else lower
    return int(min(upper, max(lower, round(number))))


def _text(value: Any, default: str = "") -> str:
    """Stripped string; plain numbers are kept as their text, anything else -> default."""
    if isinstance(value, float) and not math.isfinite(value):
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            value = str(value)
        except ValueError:
            # int too long for str() (interpreter digit limit)
            return default
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def coerce_ideas(value: Any) -> List[IdeaModel]:
    if not isinstance(value, list):
        return []
    ideas: List[IdeaModel] = []
    for item in value:
        if isinstance(item, dict):
            ideas.append(
                IdeaModel(
                    title=_text(item.get("title")),
                    description=_text(item.get("description")),
                )
            )
        elif isinstance(item, str) and item.strip():
            ideas.append(IdeaModel(title=item.strip()))
    return ideas


def _step_number(value: Any) -> Optional[int]:
    number = _as_number(value)
    if number is None or math.isinf(number) or number != int(number):
        return None
    return int(number)


def _notes_by_step(raw_steps: Any) -> Dict[int, str]:
    notes: Dict[int, str] = {}
    if not isinstance(raw_steps, list):
        return notes
    for entry in raw_steps:
        if not isinstance(entry, dict):
            continue
        number = _step_number(entry.get("step"))
        if number not in STEPS_BY_NUMBER or number in notes:
            continue
        note = _text(entry.get("note"))
        if note:
            notes[number] = note
    return notes


def build_steps(raw_steps: Any = None) -> List[StepModel]:
    """
    Exactly one entry per methodology step, in canonical order.

    The model's own step names and ordering are ignored; a note is taken
    from the entry whose `step` number matches, otherwise "Pending".
    """
    notes = _notes_by_step(raw_steps)
    return [
        StepModel(
            step=step.number,
            name=step.name,
            note=notes.get(step.number, PENDING_NOTE),
        )
        for step in METHODOLOGY_STEPS
    ]


def coerce_account(raw: RawAccount | Dict[str, Any]) -> AccountModel:
    if not isinstance(raw, RawAccount):
        raw = RawAccount.model_validate(raw if isinstance(raw, dict) else {})

    return AccountModel(
        name=_text(raw.name, DEFAULT_ACCOUNT_NAME),
        markets=_string_list(raw.markets),
        segment=_text(raw.segment, DEFAULT_SEGMENT),
        score=clamp_int(raw.score, MIN_SCORE, MAX_SCORE, default=MIN_SCORE),
        currentStep=clamp_int(raw.currentStep, FIRST_STEP, LAST_STEP, default=FIRST_STEP),
        rationale=_text(raw.rationale),
        ideas=coerce_ideas(raw.ideas),
        stage=_text(raw.stage, DEFAULT_STAGE),
        steps=build_steps(raw.steps),
    )
