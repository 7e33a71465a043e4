"""
Domain input contracts for hunt creation and playbook requests.

Both are parse-or-raise: pydantic collects every violation and they are
re-raised together as one DomainValidationError.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError

from hunting_engine.errors import DomainValidationError

SUB_CHANNEL_MAX_LENGTH = 100
MAX_MARKETS = 10
MAX_FOCUS_BRANDS = 10
MIN_ACCOUNTS = 1
MAX_ACCOUNTS = 50
DEFAULT_MAX_ACCOUNTS = 10

NonEmptyStr = Annotated[str, StringConstraints(min_length=1, strict=True)]
SubChannelStr = Annotated[
    str, StringConstraints(min_length=1, max_length=SUB_CHANNEL_MAX_LENGTH, strict=True)
]


class HuntParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    subChannel: SubChannelStr = Field(..., description="Business segment under investigation, e.g. 'QSR'")
    markets: List[NonEmptyStr] = Field(..., min_length=1, max_length=MAX_MARKETS)
    focusBrands: List[NonEmptyStr] = Field(..., min_length=1, max_length=MAX_FOCUS_BRANDS)
    maxAccounts: int = Field(
        default=DEFAULT_MAX_ACCOUNTS,
        ge=MIN_ACCOUNTS,
        le=MAX_ACCOUNTS,
        strict=True,
        description="Upper bound requested from synthesis (not enforced on the returned count)",
    )


class PlaybookParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    subChannel: SubChannelStr


ParamsT = TypeVar("ParamsT", bound=BaseModel)


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) if loc else "__root__"


def validation_fields(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into `{field, message, type}` entries."""
    return [
        {
            "field": _field_path(err.get("loc", ())),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]


def _parse(model: Type[ParamsT], data: Any, label: str) -> ParamsT:
    if not isinstance(data, Mapping):
        raise DomainValidationError(
            f"Invalid {label}: expected an object",
            fields=[{"field": "__root__", "message": "Input should be an object", "type": "dict_type"}],
        )
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        fields = validation_fields(e)
        names = ", ".join(dict.fromkeys(f["field"] for f in fields))
        raise DomainValidationError(f"Invalid {label}: {names}", fields=fields) from e


def validate_hunt_params(data: Any) -> HuntParams:
    return _parse(HuntParams, data, "hunt parameters")


def validate_playbook_params(data: Any) -> PlaybookParams:
    return _parse(PlaybookParams, data, "playbook parameters")
