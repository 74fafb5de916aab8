"""
Form option data and request resolution.

Turns the form's selections (country, city, industry, custom industry) into
the (catalog_text, region, industry) triple the session works on.
"""
from typing import Dict, List, Optional

from models.state import ICPInputs

# Country -> hub cities. The page preselects the first city when the country changes.
MARKET_MAPPING: Dict[str, List[str]] = {
    "USA": ["New York", "San Francisco / Silicon Valley", "Austin", "Chicago", "Boston"],
    "United Kingdom": ["London", "Manchester", "Edinburgh"],
    "Germany": ["Munich", "Berlin", "Frankfurt", "Hamburg"],
    "Canada": ["Toronto", "Calgary", "Vancouver", "Montreal"],
    "Australia": ["Sydney", "Melbourne", "Brisbane"],
    "UAE": ["Dubai", "Abu Dhabi"],
    "India": ["Bangalore", "Mumbai", "Gurgaon", "Kolkata", "Hyderabad"],
    "Singapore": ["Singapore City"],
    "Switzerland": ["Zurich", "Geneva"],
    "Global / Remote": ["Worldwide"],
}

HIGH_VALUE_INDUSTRIES: List[str] = [
    "BFSI (Banking, Financial Services, Insurance)",
    "Enterprise SaaS & Cloud Computing",
    "Healthcare & Life Sciences (Biotech)",
    "Manufacturing & Industrial IoT",
    "E-Commerce & Retail Tech",
    "Real Estate & PropTech",
    "Energy, Oil & Gas (Cleantech)",
    "Logistics & Supply Chain Management",
    "Government & Public Sector",
    "Legal Tech & Professional Services",
    "Automotive & Autonomous Systems",
    "Education Technology (EdTech)",
]

OTHER_INDUSTRY = "Other"

EXAMPLE_CATALOG = """Cehpoint
Technologies • Innovation • Intelligence

Service Catalog 2025-26
www.cehpoint.co.in

Vision & Mission
Cehpoint is more than a software company; we are a Digital Sovereign..."""


class FormError(ValueError):
    """A form selection that cannot become a valid request."""


def compose_region(city: str, country: str) -> str:
    cities = MARKET_MAPPING.get(country)
    if cities is None:
        raise FormError(f"Unknown country: {country}")
    if city not in cities:
        raise FormError(f"{city} is not a listed market for {country}")
    return f"{city}, {country}"


def resolve_industry(selected: str, custom: Optional[str] = None) -> str:
    """A non-blank custom industry wins over the dropdown selection."""
    if custom and custom.strip():
        return custom.strip()
    if selected == OTHER_INDUSTRY:
        raise FormError("Please specify the industry when choosing 'Other'")
    if selected not in HIGH_VALUE_INDUSTRIES:
        raise FormError(f"Unknown industry: {selected}")
    return selected


def build_inputs(
    catalog_text: str,
    country: str,
    city: str,
    industry: str,
    custom_industry: Optional[str] = None,
) -> ICPInputs:
    if not catalog_text.strip():
        raise FormError("Service catalog text is required")
    return ICPInputs(
        catalog_text=catalog_text,
        region=compose_region(city, country),
        industry=resolve_industry(industry, custom_industry),
    )

