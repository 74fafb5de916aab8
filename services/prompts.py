"""
Prompt templates for ICP generation and outreach refinement.

Both builders are pure: identical arguments give byte-identical prompts, which
is what makes a retry replay the exact same request.
"""

DEFAULT_BRAND = "Cehpoint"
CLIENT_PLACEHOLDER = "[Client Name]"


def sign_off(brand: str = DEFAULT_BRAND) -> str:
    return f"Regards, {brand} Team"


def build_generate_prompt(
    catalog_text: str,
    region: str,
    industry: str,
    brand: str = DEFAULT_BRAND,
) -> str:
    return f"""You are a world-class executive strategy consultant and B2B copywriter working for '{brand}'.

OBJECTIVE:
Study {brand}'s service catalog below, find the highest-value opportunity in the
target market, and produce a complete Ideal Customer Profile plus a proposal.

PARAMETERS:
- Target Market: {region}
- Target Industry: {industry}
- Context: {brand} operates as a digital-first company with global payment capability and virtual presence.

SERVICE CATALOG:
\"\"\"
{catalog_text}
\"\"\"

TASKS:
1. Service Name: the single best-fit service from the catalog
2. Target Company Profile: type, size, geography ({region}), industry ({industry})
3. Decision-Maker Profile: primary and secondary stakeholders, department and role focus
4. Client Pain Points: deep operational and financial pains
5. Business Goals of the client
6. Buying Triggers: events that create the need
7. Budget & Commercial Readiness: estimated range, buying model, approval complexity (Low, Medium or High)
8. Technical Maturity: likely stack, internal team capability (None, Limited or Mature), data readiness (Low, Medium or High)
9. Success Criteria: how the client measures ROI
10. Objections & Risks
11. Why This Client Chooses Us: match against our strengths
12. Deal Qualification Checklist: true/false for what is typical of an IDEAL client
13. Ideal Engagement Model (e.g. Pilot -> Scale)
14. Red Flags that disqualify a prospect
15. Upsell / Cross-Sell Potential

ALSO:
- Leads list: name 5-8 REAL, SPECIFIC companies in {region} that fit this profile.
  For each give name, website, a short description and a contact email in a
  plausible corporate format (e.g. hello@company.com). The email MUST NOT be blank.
- Outreach: write an outreach email TEMPLATE.
  - Use the placeholder {CLIENT_PLACEHOLDER} wherever the recipient is named.
  - Structure: subject line, greeting, body, call to action, sign-off.
  - The sign-off must be exactly: "{sign_off(brand)}".
  - Tone: experienced and value-first, never pushy.
  - No emojis or icons anywhere in the text.

Return strictly valid JSON matching the schema."""


def build_refine_prompt(
    current_subject: str,
    current_body: str,
    feedback: str,
    catalog_text: str,
) -> str:
    return f"""You are a world-class executive copywriter.

TASK: Rewrite an existing B2B proposal email so that it follows the user's feedback.

CONTEXT (company services):
\"\"\"
{catalog_text}
\"\"\"

CURRENT DRAFT:
Subject: {current_subject}
Body:
{current_body}

USER FEEDBACK:
\"{feedback}\"

REQUIREMENTS:
- Follow the feedback strictly (e.g. "make it shorter", "focus on robotics", "change the tone").
- Keep professional email formatting: salutation, spacing, bullet points where useful, sign-off.
- Keep any personalization placeholders such as {CLIENT_PLACEHOLDER}.
- Keep the tone top-tier professional.

Return JSON: {{"subject": string, "body": string}}"""
