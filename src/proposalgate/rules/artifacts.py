"""Artifact requirement rules used by the coverage matcher."""

from __future__ import annotations

from ..schemas import ArtifactRule

ARTIFACT_RULES: dict[str, ArtifactRule] = {
    "Certificate of Insurance": ArtifactRule(
        tags={"insurance", "coi"}, types={"pdf"}, max_age_days=365
    ),
    "Key Personnel Resume": ArtifactRule(
        tags={"resume", "key-personnel"}, types={"pdf", "docx"}
    ),
    "Past Performance": ArtifactRule(tags={"past-performance", "reference"}, types={"pdf"}),
    "Technical Volume": ArtifactRule(tags={"proposal", "technical"}, types={"pdf"}),
    "Price Volume": ArtifactRule(tags={"pricing", "price"}, types={"xlsx", "pdf"}),
    "Bonding Capacity Letter": ArtifactRule(
        tags={"bond", "bonding"}, types={"pdf"}, max_age_days=365
    ),
    "SAM Registration": ArtifactRule(tags={"sam"}, types={"pdf", "png"}, max_age_days=365),
    "Capabilities Statement": ArtifactRule(tags={"capabilities", "statement"}),
}
