"""
Markdown rendering of a completed ICP report.

Rendering is the presentation boundary: anything that goes wrong here is
wrapped in PresentationError, which main.py answers with a full session reset
rather than the retry/reset flow.
"""
from typing import List, Optional

from models.icp import ICPData, OutreachTemplate


class PresentationError(Exception):
    """Raised when a fetched report cannot be displayed."""


def _bullets(items: List[str]) -> str:
    if not items:
        return "_None identified._"
    return "\n".join(f"- {item}" for item in items)


def _check(flag: bool) -> str:
    return "[x]" if flag else "[ ]"


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _build_sections(
    report: ICPData,
    original_input: str,
    draft: OutreachTemplate,
) -> List[str]:
    profile = report.company_profile
    decision = report.decision_maker
    commercial = report.commercial_readiness
    tech = report.technical_maturity
    checklist = report.qualification_checklist
    risks = report.objections_and_risks

    sections = [f"# Ideal Customer Profile: {report.service_name}"]

    if original_input.strip():
        first_line = original_input.strip().splitlines()[0]
        sections.append(f"_Source catalog: {first_line}_")

    sections.append(
        "## Target Company Profile\n"
        f"- **Type:** {profile.type}\n"
        f"- **Size:** {profile.size}\n"
        f"- **Geography:** {profile.geography}\n"
        f"- **Industry:** {profile.industry}"
    )
    sections.append(
        "## Decision Makers\n"
        f"**Role focus:** {decision.role}\n\n"
        f"**Primary**\n{_bullets(decision.primary)}\n\n"
        f"**Secondary**\n{_bullets(decision.secondary)}"
    )
    sections.append(f"## Pain Points\n{_bullets(report.pain_points)}")
    sections.append(f"## Business Goals\n{_bullets(report.business_goals)}")
    sections.append(f"## Buying Triggers\n{_bullets(report.buying_triggers)}")
    sections.append(
        "## Commercial Readiness\n"
        f"- **Budget range:** {commercial.budget_range}\n"
        f"- **Buying model:** {commercial.buying_model}\n"
        f"- **Approval complexity:** {commercial.approval_complexity.value}"
    )
    sections.append(
        "## Technical Maturity\n"
        f"- **Internal team:** {tech.team_status.value}\n"
        f"- **Data readiness:** {tech.data_readiness.value}\n\n"
        f"**Likely stack**\n{_bullets(tech.tech_stack)}"
    )
    sections.append(f"## Success Criteria\n{_bullets(report.success_criteria)}")
    sections.append(
        "## Objections & Risks\n"
        f"**Common objections**\n{_bullets(risks.common_objections)}\n\n"
        f"**Risk factors**\n{_bullets(risks.risk_factors)}"
    )
    sections.append(f"## Why Us\n{report.why_us}")
    sections.append(
        "## Qualification Checklist\n"
        f"- {_check(checklist.problem_clarity)} Problem clarity\n"
        f"- {_check(checklist.budget_clarity)} Budget clarity\n"
        f"- {_check(checklist.decision_maker_access)} Decision-maker access\n"
        f"- {_check(checklist.timeline_defined)} Timeline defined\n"
        f"- {_check(checklist.strategic_fit)} Strategic fit"
    )
    sections.append(f"## Engagement Model\n{report.engagement_model}")
    sections.append(f"## Red Flags\n{_bullets(report.red_flags)}")
    sections.append(f"## Upsell Potential\n{_bullets(report.upsell_potential)}")

    rows = ["| Company | Website | Contact | About |", "|---|---|---|---|"]
    for client in report.potential_clients:
        rows.append(
            f"| {_cell(client.name)} | {_cell(client.website)} "
            f"| {_cell(client.contact_email)} | {_cell(client.description)} |"
        )
    sections.append("## Potential Clients\n" + "\n".join(rows))

    sections.append(
        "## Outreach Template\n"
        f"**Subject:** {draft.subject}\n\n"
        f"{draft.body}"
    )
    return sections


def render_report(
    report: ICPData,
    original_input: str = "",
    draft: Optional[OutreachTemplate] = None,
) -> str:
    """Render the report as Markdown. The draft defaults to the report's own template."""
    try:
        sections = _build_sections(report, original_input, draft or report.outreach_template)
    except Exception as e:
        raise PresentationError(f"Could not render ICP report: {e}") from e
    return "\n\n".join(sections) + "\n"
