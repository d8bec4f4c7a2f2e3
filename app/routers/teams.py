"""
API Teams: riepilogo stagionale (o su intervallo date) e rosa con statistiche chiave.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.teams import TeamRosterResponse
from app.services.player_service import get_team_roster
from app.services.team_service import get_team_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("/{team_id}/summary")
def team_summary(
    team_id: int,
    start: date | None = None,
    end: date | None = None,
    db: Session = Depends(get_db),
):
    """
    Riepilogo squadra come oggetto JSON piatto: totali, W/D/L, form,
    <campo>_avg e <campo>_total per ogni statistica di partita.
    Nessuna partita (anche dopo il filtro start/end) -> {} con 200.
    """
    try:
        return get_team_summary(team_id=team_id, db=db, start=start, end=end)
    except SQLAlchemyError as e:
        logger.exception("Errore DB summary team_id=%s: %s", team_id, e)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Errore recupero riepilogo squadra",
                "detail": str(e)[:300],
                "team_id": team_id,
            },
        )


@router.get("/{team_id}/players", response_model=TeamRosterResponse)
def team_players(team_id: int, db: Session = Depends(get_db)):
    """
    Rosa della squadra: per ogni giocatore gruppo tattico, 3 statistiche chiave
    e descrittore del grafico trend. 404 se la squadra non esiste.
    """
    try:
        roster = get_team_roster(team_id=team_id, db=db)
    except SQLAlchemyError as e:
        logger.exception("Errore DB rosa team_id=%s: %s", team_id, e)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Errore recupero rosa",
                "detail": str(e)[:300],
                "team_id": team_id,
            },
        )
    if roster is None:
        raise HTTPException(status_code=404, detail="Squadra non trovata")
    return roster
