"""Seed subcontractor pool with precomputed recommendation scores."""

from __future__ import annotations

from typing import Any

from ..schemas import SubcontractorCandidate

_RAW_POOL: list[dict[str, Any]] = [
    {
        "id": "sub-elec-001",
        "name": "Bay Electric Inc.",
        "type": "electrical",
        "specialty": ["Commercial Electrical", "HVAC Electrical", "Controls"],
        "rating": 4.8,
        "experience": "25+ years commercial electrical work",
        "location": "New Orleans, LA (8 miles from site)",
        "capacity": "+15% available",
        "pricing": {"labor_rate": 85, "markup": 15, "estimated_total": 12200, "competitive_rank": 1},
        "qualifications": [
            "Louisiana Master Electrician License #ME-4421",
            "OSHA 30-hour Certified",
            "NECA Member",
            "IES Certified Controls Specialist",
        ],
        "past_performance": [
            {"project_name": "Tulane Hospital Electrical Upgrade", "value": 180000, "year": 2023, "client_rating": 4.9},
            {"project_name": "GSA Federal Building - 2nd Floor Renovation", "value": 95000, "year": 2022, "client_rating": 4.7},
            {"project_name": "Orleans Parish School Board - Multiple Sites", "value": 220000, "year": 2023, "client_rating": 4.8},
        ],
        "availability": {"start_date": "2024-08-01", "duration": "30 days", "conflict_risk": "low"},
        "compliance_status": {
            "insurance": True,
            "licensing": True,
            "bonding": True,
            "security": True,
            "osha": True,
            "overall_score": 100,
        },
        "strengths": [
            "Proven GSA experience",
            "Local presence reduces travel costs",
            "Excellent safety record (0 incidents in 3 years)",
            "Strong HVAC electrical expertise",
        ],
        "concerns": ["Slightly higher rate than competitors", "May be overbooked during peak season"],
        "recommendation_score": 95,
    },
    {
        "id": "sub-elec-002",
        "name": "Statewide Electrical Services",
        "type": "electrical",
        "specialty": ["Industrial Electrical", "Power Systems", "Emergency Services"],
        "rating": 4.5,
        "experience": "18 years industrial and commercial electrical",
        "location": "Metairie, LA (12 miles from site)",
        "capacity": "+5% available",
        "pricing": {"labor_rate": 78, "markup": 18, "estimated_total": 11800, "competitive_rank": 2},
        "qualifications": [
            "Louisiana Journeyman Electrician License #JE-7892",
            "OSHA 10-hour Certified",
            "IBEW Local 130 Member",
        ],
        "past_performance": [
            {"project_name": "Port of New Orleans Electrical Systems", "value": 340000, "year": 2023, "client_rating": 4.6},
            {"project_name": "Jefferson Parish Government Building", "value": 125000, "year": 2022, "client_rating": 4.4},
        ],
        "availability": {"start_date": "2024-08-15", "duration": "35 days", "conflict_risk": "medium"},
        "compliance_status": {
            "insurance": True,
            "licensing": True,
            "bonding": True,
            "security": False,
            "osha": True,
            "overall_score": 85,
        },
        "strengths": ["Lower pricing than Bay Electric", "Strong industrial experience", "Fast response time"],
        "concerns": [
            "Less experience with federal projects",
            "Missing security clearance",
            "Potential scheduling conflicts",
        ],
        "recommendation_score": 72,
    },
    {
        "id": "sub-elec-003",
        "name": "Gulf Coast Power Solutions",
        "type": "electrical",
        "specialty": ["Power Distribution", "Controls", "Renewable Energy"],
        "rating": 4.2,
        "experience": "12 years commercial electrical and controls",
        "location": "Kenner, LA (18 miles from site)",
        "capacity": "-10% overbooked",
        "pricing": {"labor_rate": 72, "markup": 22, "estimated_total": 13500, "competitive_rank": 3},
        "qualifications": [
            "Louisiana Electrical Contractor License #EC-9934",
            "OSHA 30-hour Certified",
            "Schneider Electric Certified Partner",
        ],
        "past_performance": [
            {"project_name": "Louis Armstrong Airport Terminal Electrical", "value": 280000, "year": 2022, "client_rating": 4.3},
        ],
        "availability": {"start_date": "2024-09-01", "duration": "45 days", "conflict_risk": "high"},
        "compliance_status": {
            "insurance": True,
            "licensing": True,
            "bonding": False,
            "security": True,
            "osha": True,
            "overall_score": 75,
        },
        "strengths": ["Strong controls expertise", "Airport security experience", "Latest technology focus"],
        "concerns": [
            "Currently overbooked",
            "Limited federal project experience",
            "Missing bonding requirements",
            "Later start date",
        ],
        "recommendation_score": 58,
    },
    {
        "id": "sub-hvac-001",
        "name": "Statewide HVAC",
        "type": "hvac",
        "specialty": ["Commercial HVAC", "Energy Efficient Systems", "Controls Integration"],
        "rating": 4.9,
        "experience": "22+ years commercial HVAC installations",
        "location": "New Orleans, LA (5 miles from site)",
        "capacity": "+25% available",
        "pricing": {"labor_rate": 95, "markup": 12, "estimated_total": 75600, "competitive_rank": 1},
        "qualifications": [
            "EPA 608 Universal Certification",
            "NATE Certified Technicians (4)",
            "OSHA 30-hour Certified",
            "Louisiana Mechanical Contractor License #MC-5567",
        ],
        "past_performance": [
            {"project_name": "GSA Building 402 HVAC Modernization", "value": 185000, "year": 2022, "client_rating": 4.9},
            {"project_name": "Orleans Parish School Board - Jefferson Elementary", "value": 142000, "year": 2023, "client_rating": 4.8},
            {"project_name": "Tulane University Science Building", "value": 220000, "year": 2023, "client_rating": 4.9},
        ],
        "availability": {"start_date": "2024-07-25", "duration": "90 days", "conflict_risk": "low"},
        "compliance_status": {
            "insurance": True,
            "licensing": True,
            "bonding": True,
            "security": True,
            "osha": True,
            "overall_score": 100,
        },
        "strengths": [
            "Excellent GSA project history",
            "Local presence and quick response",
            "Certified energy efficiency specialists",
            "Perfect safety record",
        ],
        "concerns": [],
        "recommendation_score": 98,
    },
    {
        "id": "sub-plmb-001",
        "name": "Crescent City Plumbing & Mechanical",
        "type": "plumbing",
        "specialty": ["Commercial Plumbing", "Backflow Prevention", "Medical Gas"],
        "rating": 4.4,
        "experience": "15 years commercial and institutional plumbing",
        "location": "New Orleans, LA (10 miles from site)",
        "capacity": "+10% available",
        "pricing": {"labor_rate": 82, "markup": 16, "estimated_total": 28400, "competitive_rank": 2},
        "qualifications": [
            "Louisiana Master Plumber License #MP-3318",
            "ASSE 5110 Backflow Tester",
            "OSHA 30-hour Certified",
        ],
        "past_performance": [
            {"project_name": "VA Medical Center Domestic Water Upgrade", "value": 160000, "year": 2023, "client_rating": 4.5},
            {"project_name": "Delgado Community College Restroom Renovations", "value": 74000, "year": 2022, "client_rating": 4.3},
        ],
        "availability": {"start_date": "2024-08-05", "duration": "40 days", "conflict_risk": "low"},
        "compliance_status": {
            "insurance": True,
            "licensing": True,
            "bonding": True,
            "security": False,
            "osha": True,
            "overall_score": 88,
        },
        "strengths": ["Federal medical facility experience", "In-house backflow certification"],
        "concerns": ["Security clearance pending for two technicians"],
        "recommendation_score": 81,
    },
]

CANDIDATE_POOL: tuple[SubcontractorCandidate, ...] = tuple(
    SubcontractorCandidate.model_validate(raw) for raw in _RAW_POOL
)
