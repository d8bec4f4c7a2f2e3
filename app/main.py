"""Squad Stats Dashboard: API statistiche squadra e giocatori per fan, coach e admin."""

import logging

from fastapi import FastAPI

from app.core.config import get_log_level
from app.core.database import init_db
from app.routers import health_router, players_router, teams_router

app = FastAPI(
    title="Squad Stats Dashboard",
    description="Riepiloghi stagionali di squadra e statistiche per ruolo dei giocatori.",
    version="0.1.0",
)

app.include_router(health_router)
app.include_router(teams_router)
app.include_router(players_router)


@app.on_event("startup")
def on_startup():
    """Configura il logging e inizializza le tabelle all'avvio."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
    init_db()
