"""Dependency injection container for the decision engine."""

from __future__ import annotations

from pathlib import Path

from dependency_injector import containers, providers

from .core import (
    CandidateScorer,
    CompletionEvaluator,
    CoverageMatcher,
    GatingConfig,
    GatingEngine,
    InMemoryProgressStore,
    PartnerConfig,
    PartnerRanking,
    ReadinessEvaluator,
    SelectionRegistry,
)
from .core.evaluators import (
    CandidateScoringConfig,
    CompletionConfig,
    CoverageConfig,
    ReadinessConfig,
)
from .engine import AuditLogger, DecisionEngine
from .rules import ARTIFACT_RULES, CANDIDATE_POOL, JOURNEY_ORDER, SECTION_TEMPLATES


def _audit_logger(path: str | Path | None) -> AuditLogger | None:
    return AuditLogger(Path(path)) if path else None


class EngineContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    section_templates = providers.Object(SECTION_TEMPLATES)
    journey_order = providers.Object(JOURNEY_ORDER)
    artifact_rules = providers.Object(ARTIFACT_RULES)
    candidate_pool = providers.Object(CANDIDATE_POOL)

    progress_store = providers.Singleton(InMemoryProgressStore)
    selection_registry = providers.Singleton(SelectionRegistry)

    completion_evaluator = providers.Singleton(CompletionEvaluator)
    coverage_matcher = providers.Singleton(CoverageMatcher, rules=artifact_rules)
    candidate_scorer = providers.Singleton(CandidateScorer)
    readiness_evaluator = providers.Singleton(ReadinessEvaluator)

    gating_engine = providers.Singleton(
        GatingEngine,
        templates=section_templates,
        journey=journey_order,
        store=progress_store,
        evaluator=completion_evaluator,
        config=providers.Factory(GatingConfig),
    )

    partner_ranking = providers.Singleton(
        PartnerRanking,
        pool=candidate_pool,
        scorer=candidate_scorer,
        registry=selection_registry,
        config=providers.Factory(PartnerConfig),
    )

    audit_logger = providers.Callable(_audit_logger, path=config.audit_log)

    engine = providers.Singleton(
        DecisionEngine,
        gating=gating_engine,
        coverage=coverage_matcher,
        partners=partner_ranking,
        readiness=readiness_evaluator,
        audit_logger=audit_logger,
    )


def create_container(*, settings: dict | None = None) -> EngineContainer:
    """Instantiate container with optional overrides."""

    container = EngineContainer()

    if not settings:
        return container

    if not isinstance(settings, dict):
        raise TypeError("settings must be a mapping")

    if settings.get("audit_log"):
        container.config.audit_log.from_value(str(settings["audit_log"]))

    rule_settings = settings.get("rules", {})
    if rule_settings.get("artifacts"):
        merged = dict(ARTIFACT_RULES)
        merged.update(rule_settings["artifacts"])
        container.artifact_rules.override(providers.Object(merged))

    if "completion" in settings:
        completion_config = CompletionConfig(**settings["completion"])
        container.completion_evaluator.override(
            providers.Singleton(CompletionEvaluator, config=completion_config)
        )

    if "coverage" in settings:
        coverage_config = CoverageConfig(**settings["coverage"])
        container.coverage_matcher.override(
            providers.Singleton(
                CoverageMatcher,
                rules=container.artifact_rules,
                config=coverage_config,
            )
        )

    if "scoring" in settings:
        scoring_config = CandidateScoringConfig(**settings["scoring"])
        container.candidate_scorer.override(
            providers.Singleton(CandidateScorer, config=scoring_config)
        )

    if "readiness" in settings:
        readiness_config = ReadinessConfig(**settings["readiness"])
        container.readiness_evaluator.override(
            providers.Singleton(ReadinessEvaluator, config=readiness_config)
        )

    if "gating" in settings:
        gating_config = GatingConfig(**settings["gating"])
        container.gating_engine.override(
            providers.Singleton(
                GatingEngine,
                templates=container.section_templates,
                journey=container.journey_order,
                store=container.progress_store,
                evaluator=container.completion_evaluator,
                config=gating_config,
            )
        )

    if "partners" in settings:
        partner_config = PartnerConfig(**settings["partners"])
        container.partner_ranking.override(
            providers.Singleton(
                PartnerRanking,
                pool=container.candidate_pool,
                scorer=container.candidate_scorer,
                registry=container.selection_registry,
                config=partner_config,
            )
        )

    return container
