"""
Structured-output contracts sent to Gemini with each request.

These mirror models/icp.py: the schema tells the model what to produce, the
pydantic models check that it did.
"""
from google.genai import types
from typing import Dict, List, Optional

from models.icp import Level, TeamStatus


def _string(description: Optional[str] = None, enum: Optional[List[str]] = None) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description, enum=enum)


def _string_list(description: Optional[str] = None) -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        description=description,
        items=types.Schema(type=types.Type.STRING),
    )


def _boolean() -> types.Schema:
    return types.Schema(type=types.Type.BOOLEAN)


def _object(properties: Dict[str, types.Schema], description: Optional[str] = None) -> types.Schema:
    # Every property is required; partial reports are rejected downstream anyway.
    return types.Schema(
        type=types.Type.OBJECT,
        description=description,
        properties=properties,
        required=list(properties),
    )


_LEVELS = [level.value for level in Level]
_TEAM_STATUSES = [status.value for status in TeamStatus]

OUTREACH_SCHEMA = _object({
    "subject": _string(),
    "body": _string(),
})

ICP_SCHEMA = _object({
    "serviceName": _string("Best-fit service from the catalog"),
    "companyProfile": _object({
        "type": _string("Company structure type (e.g. SMB, Enterprise)"),
        "size": _string("Employees count and Revenue range"),
        "geography": _string(),
        "industry": _string(),
    }),
    "decisionMaker": _object({
        "primary": _string_list(),
        "secondary": _string_list(),
        "role": _string("Key department and role focus"),
    }),
    "painPoints": _string_list(),
    "businessGoals": _string_list(),
    "buyingTriggers": _string_list(),
    "commercialReadiness": _object({
        "budgetRange": _string(),
        "buyingModel": _string(),
        "approvalComplexity": _string(enum=_LEVELS),
    }),
    "technicalMaturity": _object({
        "techStack": _string_list(),
        "teamStatus": _string(enum=_TEAM_STATUSES),
        "dataReadiness": _string(enum=_LEVELS),
    }),
    "successCriteria": _string_list(),
    "objectionsAndRisks": _object({
        "commonObjections": _string_list(),
        "riskFactors": _string_list(),
    }),
    "whyUs": _string(),
    "qualificationChecklist": _object({
        "problemClarity": _boolean(),
        "budgetClarity": _boolean(),
        "decisionMakerAccess": _boolean(),
        "timelineDefined": _boolean(),
        "strategicFit": _boolean(),
    }),
    "engagementModel": _string(),
    "redFlags": _string_list(),
    "upsellPotential": _string_list(),
    "potentialClients": types.Schema(
        type=types.Type.ARRAY,
        description="List of 5-8 specific, real companies in the target market.",
        items=_object({
            "name": _string(),
            "website": _string(),
            "description": _string(),
            "contactEmail": _string("A plausible general contact email (e.g. info@, partnerships@)"),
        }),
    ),
    "outreachTemplate": OUTREACH_SCHEMA,
})
