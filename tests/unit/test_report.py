"""Unit tests for report rendering."""

import pytest

from models.icp import ICPData, OutreachTemplate
from services.report import PresentationError, render_report


class TestRenderReport:
    """Test Markdown rendering."""

    def test_sections_present(self, icp_report):
        markdown = render_report(icp_report, "We build CRM integrations")

        assert markdown.startswith("# Ideal Customer Profile: CRM Integration & Automation")
        for heading in (
            "## Target Company Profile",
            "## Decision Makers",
            "## Commercial Readiness",
            "## Technical Maturity",
            "## Qualification Checklist",
            "## Potential Clients",
            "## Outreach Template",
        ):
            assert heading in markdown
        assert "- **Geography:** Bangalore, India" in markdown
        assert "- **Approval complexity:** Medium" in markdown
        assert "- [ ] Budget clarity" in markdown
        assert "- [x] Strategic fit" in markdown
        assert "_Source catalog: We build CRM integrations_" in markdown

    def test_leads_table(self, icp_report):
        markdown = render_report(icp_report)

        assert "| Freshworks | https://www.freshworks.com | partners@freshworks.com |" in markdown
        assert "| Zoho |" in markdown

    def test_uses_draft_over_template(self, icp_report):
        draft = OutreachTemplate(subject="Edited subject", body="Edited body")

        markdown = render_report(icp_report, draft=draft)

        assert "**Subject:** Edited subject" in markdown
        assert icp_report.outreach_template.subject not in markdown

    def test_empty_lists(self, icp_payload):
        icp_payload["redFlags"] = []
        report = ICPData.model_validate(icp_payload)

        markdown = render_report(report)

        assert "## Red Flags\n_None identified._" in markdown

    def test_broken_report_raises_presentation_error(self):
        """Test a report missing its data fails at the presentation boundary."""
        broken = ICPData.model_construct(service_name="Half-built")

        with pytest.raises(PresentationError):
            render_report(broken)
