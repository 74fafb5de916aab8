from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, Literal, Union
from enum import Enum

from models.icp import ICPData, OutreachTemplate


class Phase(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    COMPLETE = "complete"
    ERROR = "error"


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"


class ICPInputs(BaseModel):
    """One form submission. Kept as lastInputs until reset so retry can replay it."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    catalog_text: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1)

    @field_validator("catalog_text")
    @classmethod
    def _catalog_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("catalog text must not be blank")
        return value


class _State(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class IdleState(_State):
    phase: Literal[Phase.IDLE] = Phase.IDLE


class GeneratingState(_State):
    phase: Literal[Phase.GENERATING] = Phase.GENERATING
    inputs: ICPInputs


class CompleteState(_State):
    phase: Literal[Phase.COMPLETE] = Phase.COMPLETE
    inputs: ICPInputs
    report: ICPData
    draft: OutreachTemplate


class ErrorState(_State):
    phase: Literal[Phase.ERROR] = Phase.ERROR
    inputs: ICPInputs
    message: str = Field(..., min_length=1)
    kind: ErrorKind = ErrorKind.UNKNOWN


SessionState = Annotated[
    Union[IdleState, GeneratingState, CompleteState, ErrorState],
    Field(discriminator="phase"),
]
