"""Recommended company documents and their readiness weights."""

from __future__ import annotations

from ..schemas import ReadinessRule

RECOMMENDED_DOCS: tuple[ReadinessRule, ...] = (
    ReadinessRule(key="w9", label="IRS Form W-9", doc_type="W-9", tags=["w9"], required=True, weight=4),
    ReadinessRule(key="ein-letter", label="IRS EIN Confirmation Letter", doc_type="EIN Letter", tags=["ein", "irs"], weight=2),
    ReadinessRule(
        key="capability-statement",
        label="Capabilities Statement",
        doc_type="Capabilities Statement",
        tags=["capabilities", "statement"],
        required=True,
        weight=4,
    ),
    ReadinessRule(key="org-chart", label="Organizational Chart", doc_type="Org Chart", tags=["org", "chart"], weight=2),
    ReadinessRule(key="quality-plan", label="Quality Management Plan", doc_type="Quality Plan", tags=["quality"], weight=2),
    ReadinessRule(key="safety-plan", label="Safety Plan", doc_type="Safety Plan", tags=["safety"], weight=2),
    ReadinessRule(
        key="cybersecurity-plan",
        label="Cybersecurity/IT Security Plan",
        doc_type="Cybersecurity Plan",
        tags=["cyber", "security"],
        weight=2,
    ),
    ReadinessRule(key="key-resumes", label="Key Personnel Resumes", doc_type="Resume", tags=["resume"], required=True, weight=3),
    ReadinessRule(key="sam-confirmation", label="SAM Registration Confirmation", doc_type="SAM Confirmation", tags=["sam"], required=True, weight=3),
    ReadinessRule(
        key="gl-policy",
        label="General Liability Insurance (COI)",
        doc_type="Insurance - GL",
        tags=["general-liability"],
        required=True,
        weight=4,
    ),
    ReadinessRule(
        key="wc-policy",
        label="Workers' Compensation Insurance (COI)",
        doc_type="Insurance - WC",
        tags=["workers-comp"],
        required=True,
        weight=4,
    ),
    ReadinessRule(
        key="auto-policy",
        label="Auto Liability Insurance (COI)",
        doc_type="Insurance - Auto",
        tags=["auto-liability"],
        weight=3,
    ),
    ReadinessRule(
        key="pl-policy",
        label="Professional Liability (if applicable)",
        doc_type="Insurance - Professional",
        tags=["professional-liability"],
        weight=2,
    ),
    ReadinessRule(key="bonding-letter", label="Bonding Capacity Letter", doc_type="Bonding Letter", tags=["bond", "bonding"], weight=3),
)
