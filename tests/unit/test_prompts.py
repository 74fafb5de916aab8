"""Unit tests for prompt builders and structured-output schemas."""

from google.genai import types

from models.icp import ICPData, OutreachTemplate
from services.prompts import (
    CLIENT_PLACEHOLDER,
    build_generate_prompt,
    build_refine_prompt,
    sign_off,
)
from services.schemas import ICP_SCHEMA, OUTREACH_SCHEMA


CATALOG = "We build CRM integrations"
REGION = "Bangalore, India"
INDUSTRY = "Enterprise SaaS & Cloud Computing"


class TestGeneratePrompt:
    """Test the ICP generation prompt."""

    def test_is_deterministic(self):
        """Test identical inputs give byte-identical prompts."""
        first = build_generate_prompt(CATALOG, REGION, INDUSTRY)
        second = build_generate_prompt(CATALOG, REGION, INDUSTRY)

        assert first == second

    def test_interpolates_inputs(self):
        prompt = build_generate_prompt(CATALOG, REGION, INDUSTRY)

        assert CATALOG in prompt
        assert f"Target Market: {REGION}" in prompt
        assert f"Target Industry: {INDUSTRY}" in prompt

    def test_requests_leads_and_outreach(self):
        prompt = build_generate_prompt(CATALOG, REGION, INDUSTRY)

        assert "5-8 REAL, SPECIFIC companies" in prompt
        assert "MUST NOT be blank" in prompt
        assert CLIENT_PLACEHOLDER in prompt
        assert '"Regards, Cehpoint Team"' in prompt

    def test_brand_changes_sign_off(self):
        prompt = build_generate_prompt(CATALOG, REGION, INDUSTRY, brand="Acme")

        assert sign_off("Acme") == "Regards, Acme Team"
        assert '"Regards, Acme Team"' in prompt
        assert "Cehpoint" not in prompt

    def test_different_inputs_differ(self):
        assert build_generate_prompt(CATALOG, REGION, INDUSTRY) != build_generate_prompt(
            CATALOG, "Dubai, UAE", INDUSTRY
        )


class TestRefinePrompt:
    """Test the outreach refinement prompt."""

    def test_includes_draft_and_feedback(self):
        prompt = build_refine_prompt("Hello", "Dear team,\nBody text", "make it shorter", CATALOG)

        assert "Subject: Hello" in prompt
        assert "Dear team,\nBody text" in prompt
        assert '"make it shorter"' in prompt
        assert CATALOG in prompt
        assert '{"subject": string, "body": string}' in prompt

    def test_is_deterministic(self):
        args = ("Hello", "Body", "focus on robotics", CATALOG)

        assert build_refine_prompt(*args) == build_refine_prompt(*args)


class TestSchemas:
    """Test the Gemini response schemas agree with the pydantic models."""

    def test_icp_required_fields_match_model(self):
        expected = [field.alias for field in ICPData.model_fields.values()]

        assert ICP_SCHEMA.type == types.Type.OBJECT
        assert ICP_SCHEMA.required == expected
        assert list(ICP_SCHEMA.properties) == expected

    def test_enumerated_values(self):
        commercial = ICP_SCHEMA.properties["commercialReadiness"]
        technical = ICP_SCHEMA.properties["technicalMaturity"]

        assert commercial.properties["approvalComplexity"].enum == ["Low", "Medium", "High"]
        assert technical.properties["teamStatus"].enum == ["None", "Limited", "Mature"]
        assert technical.properties["dataReadiness"].enum == ["Low", "Medium", "High"]

    def test_nested_objects_require_all_properties(self):
        checklist = ICP_SCHEMA.properties["qualificationChecklist"]

        assert checklist.required == list(checklist.properties)
        assert checklist.properties["strategicFit"].type == types.Type.BOOLEAN

    def test_potential_clients_items(self):
        clients = ICP_SCHEMA.properties["potentialClients"]

        assert clients.type == types.Type.ARRAY
        assert clients.items.required == ["name", "website", "description", "contactEmail"]

    def test_outreach_schema(self):
        expected = [field.alias for field in OutreachTemplate.model_fields.values()]

        assert OUTREACH_SCHEMA.required == expected
        assert ICP_SCHEMA.properties["outreachTemplate"] is OUTREACH_SCHEMA
