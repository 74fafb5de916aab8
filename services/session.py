"""
Application state machine for one ICP session.

    Idle --submit--> Generating --success--> Complete
                          |
                          +--failure--> Error --retry--> Generating
    Complete/Error --reset--> Idle
    Complete/Error --submit--> Generating (fresh run overwrites the result)

States are immutable (models/state.py); every transition swaps in a new state
object. Nothing but this controller mutates `state`, and the check-and-set in
begin() happens without awaiting, so one event loop never runs two generations.
A pending refinement blocks submit, retry, reset and draft edits, so at most
one model call is ever in flight.
"""
from typing import Awaitable, Callable, Optional
import logging
import time

from models.icp import ICPData, OutreachTemplate
from models.state import (
    CompleteState,
    ErrorKind,
    ErrorState,
    GeneratingState,
    ICPInputs,
    IdleState,
    SessionState,
)
from services.errors import ICPServiceError
from services.gemini import generate_icp, refine_outreach

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred while generating the ICP."

Generator = Callable[[ICPInputs], Awaitable[ICPData]]
Refiner = Callable[[OutreachTemplate, str, str], Awaitable[OutreachTemplate]]


class InvalidTransitionError(Exception):
    """Raised when an action is not allowed in the current phase."""


class ICPSession:
    def __init__(
        self,
        generator: Generator = generate_icp,
        refiner: Refiner = refine_outreach,
    ):
        self._generator = generator
        self._refiner = refiner
        self._refining = False
        self.state: SessionState = IdleState()

    @property
    def phase(self):
        return self.state.phase

    @property
    def last_inputs(self) -> Optional[ICPInputs]:
        return getattr(self.state, "inputs", None)

    @property
    def is_refining(self) -> bool:
        return self._refining

    # ---------- primitive transitions ----------

    def begin(self, inputs: ICPInputs) -> GeneratingState:
        if isinstance(self.state, GeneratingState):
            raise InvalidTransitionError("A generation is already in progress")
        self._require_not_refining("start a generation")
        self.state = GeneratingState(inputs=inputs)
        logger.info(f"Session -> generating ({inputs.industry} @ {inputs.region})")
        return self.state

    def succeed(self, report: ICPData) -> CompleteState:
        generating = self._require(GeneratingState, "complete")
        self.state = CompleteState(
            inputs=generating.inputs,
            report=report,
            draft=report.outreach_template,
        )
        logger.info(f"Session -> complete ({len(report.potential_clients)} leads)")
        return self.state

    def fail(self, message: str, kind: ErrorKind = ErrorKind.UNKNOWN) -> ErrorState:
        generating = self._require(GeneratingState, "fail")
        self.state = ErrorState(
            inputs=generating.inputs,
            message=message or DEFAULT_ERROR_MESSAGE,
            kind=kind,
        )
        logger.info(f"Session -> error [{self.state.kind.value}]")
        return self.state

    # ---------- user actions ----------

    async def submit(self, inputs: ICPInputs) -> SessionState:
        self.begin(inputs)
        return await self.resolve()

    async def resolve(self) -> SessionState:
        """Run the pending generation and settle into Complete or Error."""
        generating = self._require(GeneratingState, "resolve")
        start_time = time.time()
        try:
            report = await self._generator(generating.inputs)
        except ICPServiceError as e:
            elapsed = time.time() - start_time
            logger.error(f"ICP generation failed after {elapsed:.1f}s [{e.kind.value}]: {e.message}")
            return self.fail(e.message, e.kind)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"ICP generation crashed after {elapsed:.1f}s: {e}", exc_info=True)
            return self.fail(str(e), ErrorKind.UNKNOWN)

        logger.info(f"ICP generated in {time.time() - start_time:.1f}s")
        return self.succeed(report)

    async def retry(self) -> SessionState:
        if not isinstance(self.state, (ErrorState, CompleteState)):
            raise InvalidTransitionError(f"Cannot retry while {self.phase.value}")
        inputs = self.last_inputs
        if inputs is None:
            logger.info("Retry ignored: no previous inputs")
            return self.state
        logger.info("Retrying with last inputs")
        return await self.submit(inputs)

    def reset(self) -> IdleState:
        if isinstance(self.state, GeneratingState):
            raise InvalidTransitionError("Cannot reset while a generation is in progress")
        self._require_not_refining("reset")
        self.state = IdleState()
        logger.info("Session -> idle (reset)")
        return self.state

    def edit_draft(self, subject: str, body: str) -> OutreachTemplate:
        complete = self._require(CompleteState, "edit the outreach draft")
        self._require_not_refining("edit the outreach draft")
        draft = OutreachTemplate(subject=subject, body=body)
        self.state = complete.model_copy(update={"draft": draft})
        return draft

    async def refine_draft(self, feedback: str) -> OutreachTemplate:
        """
        Rewrite the outreach draft from user feedback.

        Only the draft is replaced; the report, inputs and phase stay as they
        are. Adapter errors propagate to the caller with the draft untouched.
        """
        complete = self._require(CompleteState, "refine the outreach draft")
        if not feedback.strip():
            raise ValueError("feedback must not be blank")
        self._require_not_refining("start another refinement")

        self._refining = True
        try:
            refined = await self._refiner(complete.draft, feedback, complete.inputs.catalog_text)
        finally:
            self._refining = False

        self.state = complete.model_copy(update={"draft": refined})
        logger.info("Outreach draft refined")
        return refined

    # ---------- helpers ----------

    def _require(self, state_cls, action: str):
        if not isinstance(self.state, state_cls):
            raise InvalidTransitionError(f"Cannot {action} while {self.phase.value}")
        return self.state

    def _require_not_refining(self, action: str) -> None:
        if self._refining:
            raise InvalidTransitionError(f"Cannot {action} while a refinement is in progress")
