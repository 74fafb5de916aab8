"""
Gemini adapter: the single outbound call behind generation and refinement.

Flow per call: client (fails fast without a key) -> generate_content with the
schema, in an executor -> JSON parse -> pydantic validation. Failures come out
as one of the ICPServiceError kinds. No retry, backoff or timeout here.
"""
from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError
from typing import Optional, Type, TypeVar
import asyncio
import json
import logging

from config import settings
from models.icp import ICPData, OutreachTemplate
from models.state import ICPInputs
from services.errors import (
    ConfigurationError,
    EmptyResponseError,
    MalformedResponseError,
    TransportError,
)
from services.prompts import build_generate_prompt, build_refine_prompt
from services.schemas import ICP_SCHEMA, OUTREACH_SCHEMA
from utils.text import preview, strip_code_fences

logger = logging.getLogger(__name__)

GENERATE_TEMPERATURE = 0.3
REFINE_TEMPERATURE = 0.4

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_client() -> genai.Client:
    """Build a client from the key configured right now."""
    if not settings.gemini_api_key:
        raise ConfigurationError(
            "API key not found. Please add GEMINI_API_KEY to your environment variables."
        )
    return genai.Client(api_key=settings.gemini_api_key)


def _call_gemini_sync(
    client: genai.Client,
    prompt: str,
    schema: types.Schema,
    temperature: float,
) -> Optional[str]:
    """Synchronous Gemini call; run via executor for async compat."""
    response = client.models.generate_content(
        model=settings.gemini_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
            temperature=temperature,
        ),
    )
    text = response.text
    logger.info(f"Gemini response: {len(text) if text else 0} chars")
    return text


def parse_structured(text: Optional[str], model_cls: Type[ModelT]) -> ModelT:
    """Parse and validate model output. No partial recovery: anything off is a failure."""
    if not text or not text.strip():
        raise EmptyResponseError("No response from AI")

    try:
        raw = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.warning(f"Unparseable AI response ({e.msg}): {preview(text)}")
        raise MalformedResponseError(
            "The AI response was not valid JSON. Please try again."
        ) from e

    try:
        return model_cls.model_validate(raw)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors()})
        logger.warning(f"AI response failed {model_cls.__name__} validation: {fields}")
        raise MalformedResponseError(
            f"The AI response was incomplete or malformed ({', '.join(fields[:5])}). Please try again."
        ) from e


async def call_structured(
    prompt: str,
    schema: types.Schema,
    model_cls: Type[ModelT],
    temperature: float,
) -> ModelT:
    client = get_client()

    loop = asyncio.get_event_loop()
    try:
        text = await loop.run_in_executor(
            None, _call_gemini_sync, client, prompt, schema, temperature
        )
    except Exception as e:
        logger.error(f"Gemini call failed: {e}", exc_info=True)
        raise TransportError(str(e) or e.__class__.__name__) from e

    return parse_structured(text, model_cls)


async def generate_icp(inputs: ICPInputs) -> ICPData:
    prompt = build_generate_prompt(
        inputs.catalog_text,
        inputs.region,
        inputs.industry,
        brand=settings.brand_name,
    )
    logger.info(f"Generating ICP for {inputs.industry} @ {inputs.region}")
    return await call_structured(prompt, ICP_SCHEMA, ICPData, GENERATE_TEMPERATURE)


async def refine_outreach(
    draft: OutreachTemplate,
    feedback: str,
    catalog_text: str,
) -> OutreachTemplate:
    prompt = build_refine_prompt(draft.subject, draft.body, feedback, catalog_text)
    logger.info(f"Refining outreach draft: {preview(feedback, 80)}")
    return await call_structured(prompt, OUTREACH_SCHEMA, OutreachTemplate, REFINE_TEMPERATURE)
