from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from models.icp import CamelModel, ICPData, OutreachTemplate
from models.state import (
    CompleteState,
    ErrorKind,
    ErrorState,
    ICPInputs,
    Phase,
    SessionState,
)


class SessionView(CamelModel):
    """What the page needs to decide which panel to show."""
    phase: Phase
    inputs: Optional[ICPInputs] = Field(
        None, description="Last submitted inputs (kept for retry until reset)",
    )
    report: Optional[ICPData] = None
    draft: Optional[OutreachTemplate] = Field(
        None, description="Editable outreach draft, independent of report.outreachTemplate",
    )
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    can_retry: bool = False

    @classmethod
    def from_state(cls, state: SessionState) -> "SessionView":
        inputs = getattr(state, "inputs", None)
        fields = {"phase": state.phase, "inputs": inputs}
        if isinstance(state, CompleteState):
            fields.update(report=state.report, draft=state.draft, can_retry=True)
        elif isinstance(state, ErrorState):
            fields.update(
                error=state.message,
                error_kind=state.kind,
                can_retry=inputs is not None,
            )
        return cls(**fields)


class FormOptions(CamelModel):
    markets: Dict[str, List[str]] = Field(description="Country -> hub cities")
    industries: List[str]
    other_industry: str
    example_catalog: str


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    kind: Optional[ErrorKind] = None
