from __future__ import annotations

from hunting_engine.constants.methodology import render_methodology


PLAYBOOK_SYSTEM_PROMPT = """
You are an expert business development strategist creating comprehensive playbooks for PepsiCo's AFH (Away From Home) division.

Your task is to synthesize hunting results into a structured, actionable playbook using the 10-step hunting model:

{methodology}

The playbook should include:
1. Executive Summary
2. Market Overview
3. Top Opportunities (ranked by score)
4. For each opportunity, detailed guidance on all 10 steps
5. Key Insights & Patterns
6. Recommended Next Steps
7. Resource Requirements

Format the playbook as professional markdown with clear sections, bullet points, and tables where appropriate.
""".strip()


PLAYBOOK_USER_PROMPT = """
Generate a comprehensive playbook for the {sub_channel} sub-channel based on these hunting results:

{hunt_summaries}

Please create a professional, actionable playbook in markdown format.
""".strip()


HUNT_SUMMARY_TEMPLATE = """
Hunt from {created}:
Markets: {markets}
Focus Brands: {focus_brands}

Top Accounts:
{accounts}
""".strip()


ACCOUNT_SUMMARY_TEMPLATE = """
- {name} (Score: {score}/100)
  Markets: {markets}
  Segment: {segment}
  Stage: {stage}
  Rationale: {rationale}
  Ideas: {ideas}
  Current Step: {current_step}/10
""".strip()


HUNT_SEPARATOR = "\n---\n"


def build_playbook_system_prompt() -> str:
    return PLAYBOOK_SYSTEM_PROMPT.format(methodology=render_methodology())


def build_playbook_user_prompt(sub_channel: str, hunt_summaries: str) -> str:
    return PLAYBOOK_USER_PROMPT.format(sub_channel=sub_channel, hunt_summaries=hunt_summaries)
