"""Checklist templates for each section of the proposal journey."""

from __future__ import annotations

from typing import Any

from ..schemas import SectionTemplate

DEFAULT_SECTION = "overview"

_RAW_TEMPLATES: dict[str, dict[str, Any]] = {
    "overview": {
        "title": "RFP Overview & Analysis",
        "description": "Understand the project requirements and establish your approach.",
        "next_section": "gap-analysis",
        "checklist": [
            {
                "key": "review-documents",
                "label": "Review RFP documents",
                "description": "Read through all RFP documents and attachments",
                "action_kind": "review",
                "action_label": "Open Documents",
                "action_url": "/documents",
                "estimated_effort": "30 min",
                "help_text": "Focus on Section C (Description/Specs) and Section L (Instructions)",
            },
            {
                "key": "key-requirements",
                "label": "Identify key requirements",
                "description": "Extract and document the main project requirements",
                "depends_on": ["review-documents"],
                "estimated_effort": "15 min",
                "help_text": "Look for technical specs, timeline, deliverables, and special requirements",
            },
            {
                "key": "deadline",
                "label": "Note submission deadline",
                "description": "Record the proposal due date and submission method",
                "action_kind": "verify",
                "estimated_effort": "2 min",
                "help_text": "Usually found in Section L - verify both date AND time",
            },
            {
                "key": "download-attachments",
                "label": "Download all attachments",
                "description": "Save all RFP documents and attachments locally",
                "required": False,
                "estimated_effort": "5 min",
            },
            {
                "key": "folder-structure",
                "label": "Create project folder structure",
                "description": "Set up organized folders for proposal development",
                "required": False,
                "estimated_effort": "10 min",
            },
        ],
    },
    "gap-analysis": {
        "title": "Gap Analysis",
        "description": "Identify what you need to address to meet all requirements.",
        "next_section": "instructions",
        "checklist": [
            {
                "key": "compare-capabilities",
                "label": "Compare requirements vs capabilities",
                "description": "Assess your current capabilities against RFP requirements",
                "estimated_effort": "45 min",
                "help_text": "Be honest about gaps - better to know now than during proposal",
            },
            {
                "key": "missing-certifications",
                "label": "Identify missing certifications",
                "description": "List any certifications or licenses you need to obtain",
                "action_kind": "verify",
                "estimated_effort": "15 min",
            },
            {
                "key": "personnel",
                "label": "Assess personnel requirements",
                "description": "Determine if you have adequate qualified staff",
                "action_kind": "review",
                "action_label": "Review Team",
                "action_url": "/staff",
                "estimated_effort": "20 min",
            },
            {
                "key": "subcontractor-needs",
                "label": "Evaluate subcontractor needs",
                "description": "Determine what work needs to be subcontracted",
                "action_kind": "review",
                "action_label": "View Subcontractors",
                "action_url": "/subcontractors",
                "estimated_effort": "30 min",
            },
            {
                "key": "mitigation-plan",
                "label": "Create gap mitigation plan",
                "description": "Document how you will address each identified gap",
                "required": False,
                "depends_on": ["compare-capabilities"],
                "estimated_effort": "25 min",
            },
        ],
    },
    "instructions": {
        "title": "Instructions to Offerors Review",
        "description": "Understand submission requirements and ensure compliance.",
        "next_section": "scope",
        "checklist": [
            {
                "key": "submission-requirements",
                "label": "Review all submission requirements",
                "description": "Check every requirement in Section L",
                "action_kind": "review",
                "action_label": "Open Instructions View",
                "estimated_effort": "20 min",
                "help_text": "Use the interactive compliance checker to track each requirement",
            },
            {
                "key": "formatting",
                "label": "Verify document formatting compliance",
                "description": "Ensure all documents meet formatting requirements",
                "action_kind": "verify",
                "depends_on": ["submission-requirements"],
                "estimated_effort": "15 min",
                "help_text": "Check font, margins, page limits, and file formats",
            },
            {
                "key": "portal-test",
                "label": "Test portal upload functionality",
                "description": "Verify you can access and upload to submission portal",
                "action_kind": "verify",
                "estimated_effort": "10 min",
            },
            {
                "key": "certifications",
                "label": "Prepare required certifications",
                "description": "Gather all required compliance certifications",
                "action_kind": "upload",
                "action_label": "Upload Certs",
                "estimated_effort": "30 min",
            },
            {
                "key": "backup-submission",
                "label": "Set up backup submission method",
                "description": "Prepare alternative submission in case of portal issues",
                "required": False,
                "depends_on": ["portal-test"],
                "estimated_effort": "15 min",
            },
        ],
    },
    "scope": {
        "title": "Scope of Work Development",
        "description": "Define your technical approach and deliverables.",
        "next_section": "compliance",
        "checklist": [
            {
                "key": "phases",
                "label": "Break down work into phases",
                "description": "Create detailed project phases and milestones",
                "estimated_effort": "60 min",
            },
            {
                "key": "deliverables",
                "label": "Define deliverables for each phase",
                "description": "Specify what will be delivered at each milestone",
                "depends_on": ["phases"],
                "estimated_effort": "45 min",
            },
            {
                "key": "timeline",
                "label": "Create project timeline",
                "description": "Develop realistic schedule with dependencies",
                "depends_on": ["phases"],
                "estimated_effort": "30 min",
            },
            {
                "key": "risks",
                "label": "Identify risks and mitigation",
                "description": "Document potential risks and how you will handle them",
                "estimated_effort": "25 min",
            },
            {
                "key": "technical-specs",
                "label": "Review technical specifications",
                "description": "Ensure your approach meets all technical requirements",
                "action_kind": "verify",
                "estimated_effort": "40 min",
            },
        ],
    },
    "compliance": {
        "title": "Compliance Matrix",
        "description": "Map your response to each RFP requirement.",
        "next_section": "pricing",
        "checklist": [
            {
                "key": "extract-requirements",
                "label": "Extract all RFP requirements",
                "description": "Create comprehensive list of all requirements",
                "action_kind": "automatic",
                "estimated_effort": "90 min",
            },
            {
                "key": "map-requirements",
                "label": "Map requirements to proposal sections",
                "description": "Link each requirement to where you address it",
                "depends_on": ["extract-requirements"],
                "estimated_effort": "60 min",
            },
            {
                "key": "verify-compliance",
                "label": "Verify compliance for each requirement",
                "description": "Confirm you meet or exceed each requirement",
                "action_kind": "verify",
                "depends_on": ["map-requirements"],
                "estimated_effort": "45 min",
            },
            {
                "key": "exceptions",
                "label": "Document any exceptions or clarifications",
                "description": "Note any areas where you take exception",
                "required": False,
                "estimated_effort": "20 min",
            },
            {
                "key": "compliance-summary",
                "label": "Create compliance summary",
                "description": "Prepare executive summary of compliance status",
                "required": False,
                "depends_on": ["verify-compliance"],
                "estimated_effort": "15 min",
            },
        ],
    },
    "pricing": {
        "title": "Pricing & Cost Proposal",
        "description": "Develop competitive and accurate pricing.",
        "next_section": "team",
        "checklist": [
            {
                "key": "labor-costs",
                "label": "Calculate direct labor costs",
                "description": "Estimate labor hours and rates for each task",
                "estimated_effort": "120 min",
            },
            {
                "key": "material-costs",
                "label": "Determine material and equipment costs",
                "description": "Get quotes for all required materials and equipment",
                "estimated_effort": "90 min",
            },
            {
                "key": "subcontractor-quotes",
                "label": "Get subcontractor quotes",
                "description": "Obtain firm pricing from all subcontractors",
                "action_kind": "review",
                "action_label": "Manage Subcontractors",
                "action_url": "/subcontractors",
                "estimated_effort": "60 min",
            },
            {
                "key": "overhead",
                "label": "Calculate overhead and profit",
                "description": "Apply appropriate overhead rates and profit margins",
                "depends_on": ["labor-costs", "material-costs", "subcontractor-quotes"],
                "estimated_effort": "30 min",
            },
            {
                "key": "competitiveness",
                "label": "Review pricing for competitiveness",
                "description": "Validate pricing against market rates and competition",
                "action_kind": "verify",
                "depends_on": ["overhead"],
                "estimated_effort": "45 min",
            },
            {
                "key": "cost-volume",
                "label": "Prepare cost volume",
                "description": "Create detailed cost breakdown documentation",
                "required": False,
                "estimated_effort": "90 min",
            },
        ],
    },
    "team": {
        "title": "Team & Subcontractors",
        "description": "Assemble your project team and finalize partnerships.",
        "next_section": "proposal",
        "checklist": [
            {
                "key": "key-personnel",
                "label": "Assign key personnel",
                "description": "Identify and assign all key positions",
                "action_kind": "review",
                "action_label": "Manage Team",
                "action_url": "/staff",
                "estimated_effort": "45 min",
            },
            {
                "key": "subcontractor-agreements",
                "label": "Finalize subcontractor agreements",
                "description": "Execute agreements with selected subcontractors",
                "action_kind": "review",
                "action_label": "Finalize Subs",
                "action_url": "/subcontractors",
                "estimated_effort": "60 min",
            },
            {
                "key": "resumes",
                "label": "Gather resumes and qualifications",
                "description": "Collect current resumes for all key personnel",
                "action_kind": "upload",
                "action_label": "Upload Resumes",
                "depends_on": ["key-personnel"],
                "estimated_effort": "30 min",
            },
            {
                "key": "clearances",
                "label": "Verify security clearances",
                "description": "Confirm all personnel have required clearances",
                "action_kind": "verify",
                "depends_on": ["key-personnel"],
                "estimated_effort": "20 min",
            },
            {
                "key": "org-chart",
                "label": "Create organizational chart",
                "description": "Develop clear project organization structure",
                "required": False,
                "estimated_effort": "25 min",
            },
        ],
    },
    "proposal": {
        "title": "Proposal Assembly",
        "description": "Compile all sections into final proposal.",
        "next_section": "review",
        "checklist": [
            {
                "key": "compile-sections",
                "label": "Compile all proposal sections",
                "description": "Assemble technical, management, and cost volumes",
                "estimated_effort": "120 min",
            },
            {
                "key": "executive-summary",
                "label": "Create executive summary",
                "description": "Write compelling summary of your solution",
                "estimated_effort": "90 min",
            },
            {
                "key": "format",
                "label": "Format and paginate proposal",
                "description": "Apply consistent formatting and page numbering",
                "action_kind": "automatic",
                "depends_on": ["compile-sections"],
                "estimated_effort": "60 min",
            },
            {
                "key": "table-of-contents",
                "label": "Generate table of contents",
                "description": "Create comprehensive TOC with page numbers",
                "depends_on": ["format"],
                "estimated_effort": "15 min",
            },
            {
                "key": "internal-review",
                "label": "Conduct internal review",
                "description": "Have team members review for accuracy and completeness",
                "action_kind": "verify",
                "depends_on": ["compile-sections", "executive-summary"],
                "estimated_effort": "180 min",
            },
        ],
    },
    "review": {
        "title": "Final Review & Submission",
        "description": "Final quality check and proposal submission.",
        "next_section": None,
        "checklist": [
            {
                "key": "final-compliance",
                "label": "Final compliance check",
                "description": "Verify proposal meets all RFP requirements",
                "action_kind": "verify",
                "estimated_effort": "60 min",
            },
            {
                "key": "proofread",
                "label": "Proofread entire proposal",
                "description": "Check for spelling, grammar, and formatting errors",
                "action_kind": "verify",
                "estimated_effort": "90 min",
            },
            {
                "key": "attachments",
                "label": "Verify all attachments included",
                "description": "Confirm all required documents are attached",
                "action_kind": "verify",
                "estimated_effort": "30 min",
            },
            {
                "key": "pdf-generation",
                "label": "Test final PDF generation",
                "description": "Generate final PDFs and verify they open correctly",
                "action_kind": "verify",
                "estimated_effort": "20 min",
            },
            {
                "key": "submit",
                "label": "Submit proposal",
                "description": "Upload to portal or deliver as required",
                "action_kind": "submit",
                "action_label": "Submit Now",
                "depends_on": ["final-compliance", "proofread", "attachments", "pdf-generation"],
                "estimated_effort": "15 min",
            },
            {
                "key": "confirm-receipt",
                "label": "Confirm receipt",
                "description": "Verify government has received your proposal",
                "required": False,
                "action_kind": "verify",
                "depends_on": ["submit"],
                "estimated_effort": "10 min",
            },
        ],
    },
}

SECTION_TEMPLATES: dict[str, SectionTemplate] = {
    section_id: SectionTemplate.model_validate(raw)
    for section_id, raw in _RAW_TEMPLATES.items()
}

JOURNEY_ORDER: tuple[str, ...] = tuple(_RAW_TEMPLATES)
