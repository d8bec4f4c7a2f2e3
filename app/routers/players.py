"""API Players: statistiche derivate per ruolo di un singolo giocatore."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.players import PlayerStatsResponse
from app.services.player_service import get_player_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


@router.get("/{player_id}/stats", response_model=PlayerStatsResponse)
def player_stats(player_id: int, db: Session = Depends(get_db)):
    """
    Key stats (3), general stats (5), position stats e serie per il grafico.
    Contatori sommati su tutte le partite del giocatore. 404 se non esiste.
    """
    try:
        stats = get_player_stats(player_id=player_id, db=db)
    except SQLAlchemyError as e:
        logger.exception("Errore DB statistiche player_id=%s: %s", player_id, e)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Errore recupero statistiche giocatore",
                "detail": str(e)[:300],
                "player_id": player_id,
            },
        )
    if stats is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    return stats
