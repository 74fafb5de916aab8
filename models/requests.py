from pydantic import BaseModel, Field
from typing import Optional


class GenerateRequest(BaseModel):
    catalog_text: str = Field(
        ..., min_length=1, max_length=50000,
        description="Service catalog / capabilities text (pasted or dictated)",
    )
    country: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    industry: str = Field(
        ..., min_length=1, max_length=200,
        description="One of the listed industries, or 'Other'",
    )
    custom_industry: Optional[str] = Field(
        None, max_length=200,
        description="Free-text industry; overrides the selection when non-blank",
    )


class OutreachEditRequest(BaseModel):
    subject: str = Field(..., max_length=1000)
    body: str = Field(..., max_length=20000)


class RefineRequest(BaseModel):
    feedback: str = Field(
        ..., min_length=1, max_length=2000,
        description="e.g. 'make it shorter', 'focus on robotics', 'change the tone'",
    )
