"""
Servizio riepilogo squadra: carica le partite concluse dal DB e le passa
all'aggregatore (totali, medie null-safe, form). Nessuna logica di calcolo qui.
"""

import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from app.analytics.team_summary import aggregate_team_summary
from app.core.config import get_form_length
from app.models import Match

logger = logging.getLogger(__name__)

COMPLETED = "completed"

# Letto all'import, come DATABASE_URL in database.py.
FORM_LENGTH = get_form_length()


def _match_to_row(m: Match) -> dict[str, Any]:
    return {
        "date": m.date,
        "team_score": m.team_score,
        "opponent_score": m.opponent_score,
        "possession": m.possession,
        "pass_accuracy": m.pass_accuracy,
        "shots": m.shots,
        "shots_on_target": m.shots_on_target,
        "corners": m.corners,
        "fouls": m.fouls,
        "offsides": m.offsides,
        "xg": m.xg,
        "passes": m.passes,
        "tackles": m.tackles,
        "saves": m.saves,
    }


def get_team_match_rows(team_id: int, db: Session) -> list[dict[str, Any]]:
    """Righe grezze delle partite concluse della squadra. Eccezioni SQLAlchemy propagate al chiamante."""
    matches = (
        db.query(Match)
        .filter(Match.team_id == team_id, Match.status == COMPLETED)
        .order_by(Match.date.desc())
        .all()
    )
    return [_match_to_row(m) for m in matches]


def get_team_summary(
    team_id: int,
    db: Session,
    start: date | None = None,
    end: date | None = None,
) -> dict[str, Any]:
    """
    Riepilogo squadra sulle partite concluse, opzionalmente limitato a [start, end].
    {} se non ci sono partite (anche dopo il filtro).
    """
    rows = get_team_match_rows(team_id, db)
    date_range = (start, end) if start is not None or end is not None else None
    summary = aggregate_team_summary(rows, date_range=date_range, form_length=FORM_LENGTH)
    logger.info(
        "Riepilogo team_id=%s: %d partite lette, %s aggregate",
        team_id, len(rows), summary.get("total_matches", 0),
    )
    return summary
