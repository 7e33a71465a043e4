"""
The 10-step hunting model.

Process-wide constant data shared by the hunt and playbook orchestrators.
Step numbers are 1-based and contiguous.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class MethodologyStep:
    number: int
    name: str
    description: str


METHODOLOGY_STEPS: Tuple[MethodologyStep, ...] = (
    MethodologyStep(
        1,
        "Define Opportunity",
        "Clarify sub-channel, markets, target customer type, and AFH occasions.",
    ),
    MethodologyStep(
        2,
        "Scan Universe",
        "Build a long-list of potential customers in those markets (real companies where possible).",
    ),
    MethodologyStep(
        3,
        "Prioritise & Score",
        "Rank targets on scale, multi-market reach, AFH relevance, and ease/speed to pilot.",
    ),
    MethodologyStep(
        4,
        "Insight & Hypothesis",
        "Form hypotheses on their shopper/consumer needs, current gaps, and decision-makers.",
    ),
    MethodologyStep(
        5,
        "Value Proposition",
        "Design 1-2 platform ideas per top target (brands, occasions, commercial logic).",
    ),
    MethodologyStep(
        6,
        "Internal Alignment",
        "Identify which BU, bottler(s), and functions must be engaged and why.",
    ),
    MethodologyStep(
        7,
        "Approach Plan",
        "Define the route in (RFP, C-suite, operator HQ), key messages, and meeting objectives.",
    ),
    MethodologyStep(
        8,
        "Discovery & Qualification",
        "First contact, key questions, and signals to qualify or deprioritise the lead.",
    ),
    MethodologyStep(
        9,
        "Proposal & Negotiation",
        "Shape of proposal, value drivers, investment asks, and potential trade-offs.",
    ),
    MethodologyStep(
        10,
        "Pilot & Learn",
        "Recommended pilot design, simple KPIs, and how learning will feed the next wave of hunts.",
    ),
)

STEPS_BY_NUMBER: Mapping[int, MethodologyStep] = MappingProxyType(
    {step.number: step for step in METHODOLOGY_STEPS}
)

STEP_COUNT = len(METHODOLOGY_STEPS)
FIRST_STEP = METHODOLOGY_STEPS[0].number
LAST_STEP = METHODOLOGY_STEPS[-1].number

PENDING_NOTE = "Pending"


def render_methodology() -> str:
    """Numbered list used inside the system instructions."""
    return "\n".join(
        f"{step.number}. {step.name}: {step.description}" for step in METHODOLOGY_STEPS
    )
