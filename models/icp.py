from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel
from typing import List
from enum import Enum


class Level(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TeamStatus(str, Enum):
    NONE = "None"
    LIMITED = "Limited"
    MATURE = "Mature"


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire (the schema's key style)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanyProfile(CamelModel):
    type: str = Field(description="Company structure type (e.g. SMB, Enterprise)")
    size: str = Field(description="Employee count and revenue range")
    geography: str
    industry: str


class DecisionMaker(CamelModel):
    primary: List[str]
    secondary: List[str]
    role: str = Field(description="Key department and role focus")


class CommercialReadiness(CamelModel):
    budget_range: str
    buying_model: str = Field(description="One-time / Retainer / Subscription / Hybrid")
    approval_complexity: Level


class TechnicalMaturity(CamelModel):
    tech_stack: List[str]
    team_status: TeamStatus
    data_readiness: Level


class ObjectionsAndRisks(CamelModel):
    common_objections: List[str]
    risk_factors: List[str]


class QualificationChecklist(CamelModel):
    problem_clarity: StrictBool
    budget_clarity: StrictBool
    decision_maker_access: StrictBool
    timeline_defined: StrictBool
    strategic_fit: StrictBool


class PotentialClient(CamelModel):
    name: str
    website: str
    description: str
    contact_email: str = Field(description="Plausible general contact email (info@, partnerships@)")


class OutreachTemplate(CamelModel):
    subject: str
    body: str


class ICPData(CamelModel):
    """A complete Ideal Customer Profile report. Every field is required."""
    service_name: str
    company_profile: CompanyProfile
    decision_maker: DecisionMaker
    pain_points: List[str]
    business_goals: List[str]
    buying_triggers: List[str]
    commercial_readiness: CommercialReadiness
    technical_maturity: TechnicalMaturity
    success_criteria: List[str]
    objections_and_risks: ObjectionsAndRisks
    why_us: str
    qualification_checklist: QualificationChecklist
    engagement_model: str = Field(
        description="Discovery / MVP / Pilot / Full-scale / Long-term Partnership",
    )
    red_flags: List[str]
    upsell_potential: List[str]
    potential_clients: List[PotentialClient] = Field(
        description="5-8 real companies in the target market (requested, not enforced)",
    )
    outreach_template: OutreachTemplate
