"""Pytest configuration and fixtures."""

import copy
import json
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import settings
from models.icp import ICPData, OutreachTemplate
from models.state import ICPInputs
from services.session import ICPSession


SAMPLE_ICP_PAYLOAD = {
    "serviceName": "CRM Integration & Automation",
    "companyProfile": {
        "type": "Mid-market Enterprise",
        "size": "200-1000 employees, $20M-$150M revenue",
        "geography": "Bangalore, India",
        "industry": "Enterprise SaaS & Cloud Computing",
    },
    "decisionMaker": {
        "primary": ["CTO", "VP Engineering"],
        "secondary": ["Head of Sales Operations"],
        "role": "Technology and revenue operations",
    },
    "painPoints": ["Disconnected sales and support data", "Manual CRM data entry"],
    "businessGoals": ["Shorter sales cycles", "Single customer view"],
    "buyingTriggers": ["New CRM rollout", "Series C funding"],
    "commercialReadiness": {
        "budgetRange": "$40k-$120k",
        "buyingModel": "Pilot then retainer",
        "approvalComplexity": "Medium",
    },
    "technicalMaturity": {
        "techStack": ["Salesforce", "AWS", "Python"],
        "teamStatus": "Limited",
        "dataReadiness": "Medium",
    },
    "successCriteria": ["Sync latency under 5 minutes", "30% less manual entry"],
    "objectionsAndRisks": {
        "commonObjections": ["We can build it in-house"],
        "riskFactors": ["Legacy data quality"],
    },
    "whyUs": "Proven CRM integration accelerators and a global delivery model.",
    "qualificationChecklist": {
        "problemClarity": True,
        "budgetClarity": False,
        "decisionMakerAccess": True,
        "timelineDefined": False,
        "strategicFit": True,
    },
    "engagementModel": "Discovery -> Pilot -> Scale",
    "redFlags": ["No executive sponsor"],
    "upsellPotential": ["Analytics dashboards", "AI lead scoring"],
    "potentialClients": [
        {
            "name": "Freshworks",
            "website": "https://www.freshworks.com",
            "description": "Customer engagement software.",
            "contactEmail": "partners@freshworks.com",
        },
        {
            "name": "Zoho",
            "website": "https://www.zoho.com",
            "description": "Cloud business software suite.",
            "contactEmail": "hello@zoho.com",
        },
    ],
    "outreachTemplate": {
        "subject": "Unifying [Client Name]'s customer data",
        "body": "Dear [Client Name] team,\n\nWe help SaaS leaders connect their CRM.\n\nRegards, Cehpoint Team",
    },
}


@pytest.fixture
def icp_payload():
    """Schema-conformant ICP payload (camelCase, as Gemini returns it)."""
    return copy.deepcopy(SAMPLE_ICP_PAYLOAD)


@pytest.fixture
def icp_report(icp_payload):
    return ICPData.model_validate(icp_payload)


@pytest.fixture
def sample_inputs():
    return ICPInputs(
        catalog_text="We build CRM integrations",
        region="Bangalore, India",
        industry="Enterprise SaaS & Cloud Computing",
    )


@pytest.fixture
def refined_draft():
    return OutreachTemplate(
        subject="Quick idea for [Client Name]",
        body="Hi [Client Name],\n\nShort version: we connect your CRM.\n\nRegards, Cehpoint Team",
    )


@pytest.fixture
def fake_session(icp_report, refined_draft):
    """Session whose generator and refiner are AsyncMocks (no network)."""
    return ICPSession(
        generator=AsyncMock(return_value=icp_report),
        refiner=AsyncMock(return_value=refined_draft),
    )


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")


def make_gemini_client(*texts):
    """Mock genai.Client whose generate_content returns each text in turn (or raises it)."""
    client = MagicMock()
    side_effects = []
    for text in texts:
        if isinstance(text, Exception):
            side_effects.append(text)
        else:
            response = MagicMock()
            response.text = json.dumps(text) if isinstance(text, dict) else text
            side_effects.append(response)
    client.models.generate_content.side_effect = side_effects
    return client


@pytest.fixture
def gemini_client():
    """Factory fixture: gemini_client(payload_or_text_or_exception, ...)."""
    return make_gemini_client
