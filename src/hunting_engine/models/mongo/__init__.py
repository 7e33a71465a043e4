"""MongoDB models for the hunting engine."""

from .hunts.docs.hunts import HuntDoc
from .hunts.embedded.accounts import AccountModel, IdeaModel, StepModel
from .hunts.embedded.hunt_result import HuntResultModel
from .playbooks.docs.playbooks import PlaybookDoc

__all__ = [
    "HuntDoc",
    "AccountModel",
    "IdeaModel",
    "StepModel",
    "HuntResultModel",
    "PlaybookDoc",
]
