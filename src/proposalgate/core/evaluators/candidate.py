"""Dynamic weighted scoring of subcontractor candidates."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...schemas import ConflictRisk, SelectionCriteria, SubcontractorCandidate


@dataclass
class CandidateScoringConfig:
    """Component scales for the weighted candidate score.

    ``experience_cap`` bounds the experience component; ``None`` leaves it
    uncapped so six past projects still score 120 before weighting.
    ``price_floor`` bounds the price component from below; ``None`` lets a
    rank past ``rank_ceiling`` score negative.
    """

    rank_ceiling: int = 4
    points_per_rank: float = 25.0
    points_per_rating: float = 20.0
    schedule_scores: dict[str, float] = field(
        default_factory=lambda: {
            ConflictRisk.LOW.value: 100.0,
            ConflictRisk.MEDIUM.value: 70.0,
            ConflictRisk.HIGH.value: 40.0,
        }
    )
    points_per_engagement: float = 20.0
    experience_cap: float | None = None
    price_floor: float | None = None


@dataclass(slots=True)
class CandidateScore:
    """Per-dimension components behind a candidate's weighted total."""

    candidate_id: str
    price: float
    quality: float
    schedule: float
    experience: float
    total: int
    criteria: SelectionCriteria
    rationale: list[str] = field(default_factory=list)


class CandidateScorer:
    """Combine price, quality, schedule and experience into one score."""

    method = "candidate"

    def __init__(self, *, config: CandidateScoringConfig | None = None) -> None:
        self._config = config or CandidateScoringConfig()

    def score(self, candidate: SubcontractorCandidate, criteria: SelectionCriteria) -> int:
        return self.breakdown(candidate, criteria).total

    def breakdown(
        self,
        candidate: SubcontractorCandidate,
        criteria: SelectionCriteria,
    ) -> CandidateScore:
        config = self._config
        rank = candidate.pricing.competitive_rank
        price = (config.rank_ceiling - rank) * config.points_per_rank
        if config.price_floor is not None:
            price = max(price, config.price_floor)
        quality = candidate.rating * config.points_per_rating
        risk = candidate.availability.conflict_risk
        schedule = config.schedule_scores.get(risk.value, 0.0)
        engagements = len(candidate.past_performance)
        experience = engagements * config.points_per_engagement
        if config.experience_cap is not None:
            experience = min(experience, config.experience_cap)

        weighted = (
            price * criteria.price
            + quality * criteria.quality
            + schedule * criteria.schedule
            + experience * criteria.experience
        )
        # Python rounding is half-to-even: 88.5 scores 88.
        total = round(weighted / 100)

        return CandidateScore(
            candidate_id=candidate.id,
            price=price,
            quality=quality,
            schedule=schedule,
            experience=experience,
            total=total,
            criteria=criteria,
            rationale=[
                f"price rank {rank} -> {price:g}",
                f"rating {candidate.rating:g} -> {quality:g}",
                f"{risk.value} conflict risk -> {schedule:g}",
                f"{engagements} past projects -> {experience:g}",
            ],
        )
