"""
AFH Hunting Engine

Business-development tracking service built around the 10-step hunting model:
hunts enumerate and score candidate accounts with an LLM, playbooks synthesize
narrative guidance from the hunts recorded for a sub-channel.
"""

__version__ = "1.0.0"
