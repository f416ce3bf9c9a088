"""Typer CLI entrypoint for the decision engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import pendulum
import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import EngineContainer, create_container
from .core import DEFAULT_SESSION, EngineError, RankedCandidate
from .logging import configure_logging

app = typer.Typer(help="Proposal checklist gating, document coverage and partner ranking CLI.")


def _config_option() -> Any:
    return typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")


def _log_level_option() -> Any:
    return typer.Option("WARNING", help="Log level for structured logging.")


def _output_option() -> Any:
    return typer.Option(None, dir_okay=False, resolve_path=True, help="Output JSON path (stdout when omitted).")


def _documents_option() -> Any:
    return typer.Option(..., exists=True, readable=True, dir_okay=False, help="Documents JSON path.")


@app.command()
def checklist(
    section: str = typer.Option("overview", help="Section id."),
    complete: Optional[List[str]] = typer.Option(None, "--complete", help="Item id to mark complete (repeatable)."),
    reopen: Optional[List[str]] = typer.Option(None, "--reopen", help="Item id to mark incomplete (repeatable)."),
    batch: bool = typer.Option(False, help="Apply all updates in one batch without automatic cascades."),
    journey: bool = typer.Option(False, help="Emit every journey section instead of one section."),
    session: str = typer.Option(DEFAULT_SESSION, help="Session id."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
    output: Optional[Path] = _output_option(),
) -> None:
    """Open a section, apply checklist updates and report progress."""
    container = _bootstrap(config, log_level)
    engine = container.engine()

    updates = [{"item_id": item_id, "completed": True} for item_id in complete or []]
    updates += [{"item_id": item_id, "completed": False} for item_id in reopen or []]

    progress = engine.initialize_section(section, session_id=session)
    try:
        if batch:
            progress = engine.batch_update(section, updates, session_id=session)
        else:
            for update in updates:
                progress = engine.update_checklist_item(
                    section, update["item_id"], update["completed"], session_id=session
                )
    except EngineError as exc:
        _fail(exc)

    if journey:
        payload: Any = [entry.model_dump(mode="json") for entry in engine.journey(session_id=session)]
    else:
        payload = progress.model_dump(mode="json")
        next_item = engine.next_incomplete_item(section, session_id=session)
        payload["next_incomplete_item"] = next_item.id if next_item else None
    _emit(payload, output)


@app.command()
def coverage(
    documents: Path = _documents_option(),
    artifact: Optional[List[str]] = typer.Option(
        None, "--artifact", help="Artifact name to match (repeatable; defaults to every rule)."
    ),
    as_of: Optional[str] = typer.Option(None, help="Reference timestamp (ISO) for freshness and expiry."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
    output: Optional[Path] = _output_option(),
) -> None:
    """Match artifact requirements against a document pool."""
    container = _bootstrap(config, log_level)
    engine = container.engine()
    names = artifact or container.coverage_matcher().artifacts
    now = _parse_as_of(as_of)

    matches = engine.match_artifacts(names, _load_documents(documents), now=now)
    _emit([match.model_dump(mode="json") for match in matches], output)


@app.command()
def readiness(
    documents: Path = _documents_option(),
    phase_minimum: Optional[int] = typer.Option(None, help="Minimum readiness for a phase; adds its status."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
    output: Optional[Path] = _output_option(),
) -> None:
    """Score company readiness from the documents on file."""
    container = _bootstrap(config, log_level)
    engine = container.engine()

    report = engine.evaluate_readiness(_load_documents(documents))
    payload = report.model_dump(mode="json")
    if phase_minimum is not None:
        payload["phase_status"] = engine.phase_status(report.score, phase_minimum).value
    _emit(payload, output)


@app.command()
def rank(
    specialty: str = typer.Option(..., help="Specialty or trade to rank candidates for."),
    price: float = typer.Option(30.0, help="Price weight."),
    quality: float = typer.Option(40.0, help="Quality weight."),
    schedule: float = typer.Option(20.0, help="Schedule weight."),
    experience: float = typer.Option(10.0, help="Experience weight."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
    output: Optional[Path] = _output_option(),
) -> None:
    """Rank subcontractor candidates for a specialty."""
    container = _bootstrap(config, log_level)
    engine = container.engine()
    criteria = {"price": price, "quality": quality, "schedule": schedule, "experience": experience}

    try:
        ranked = engine.rank(specialty, criteria)
    except (EngineError, ValidationError) as exc:
        _fail(exc)
    _emit([_ranked_payload(entry) for entry in ranked], output)


@app.command()
def select(
    rfp_id: str = typer.Option(..., help="RFP identifier."),
    category: str = typer.Option(..., help="Selection category (specialty)."),
    candidate_id: str = typer.Option(..., help="Chosen candidate id."),
    notes: str = typer.Option("", help="Free-form selection notes."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
    output: Optional[Path] = _output_option(),
) -> None:
    """Record a subcontractor selection for an RFP category."""
    container = _bootstrap(config, log_level, audit_log=audit_log)
    engine = container.engine()

    try:
        selection = engine.select(rfp_id, category, candidate_id, notes)
    except EngineError as exc:
        _fail(exc)
    _emit(selection.model_dump(mode="json"), output)


def _bootstrap(
    config: Optional[Path],
    log_level: str,
    *,
    audit_log: Optional[Path] = None,
) -> EngineContainer:
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = ConfigManager.load_path(config)
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc
    if audit_log:
        settings["audit_log"] = str(audit_log)

    configure_logging(log_level)
    return create_container(settings=settings)


def _load_documents(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if isinstance(loaded, dict):
        loaded = loaded.get("documents")
    if not isinstance(loaded, list):
        raise typer.BadParameter("Documents file must be a JSON array", param_name="documents")
    return loaded


def _parse_as_of(value: Optional[str]) -> pendulum.DateTime | None:
    if value is None:
        return None
    try:
        return pendulum.instance(pendulum.parse(value))
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise typer.BadParameter(f"Invalid timestamp {value!r}", param_name="as_of") from exc


def _ranked_payload(entry: RankedCandidate) -> dict[str, Any]:
    score = entry.score
    return {
        "position": entry.position,
        "candidate_id": entry.candidate.id,
        "name": entry.candidate.name,
        "recommendation_score": entry.candidate.recommendation_score,
        "score": score.total,
        "components": {
            "price": score.price,
            "quality": score.quality,
            "schedule": score.schedule,
            "experience": score.experience,
        },
        "rationale": score.rationale,
    }


def _emit(payload: Any, output: Optional[Path]) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Results saved to {output}.")


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
