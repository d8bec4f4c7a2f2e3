"""SQLAlchemy engine, session, dependency e migrazione automatica."""

import logging

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_database_url

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    """SQLite (sviluppo/test) vuole check_same_thread=False; in-memory anche StaticPool."""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


_database_url = get_database_url()

engine = create_engine(_database_url, echo=False, **_engine_kwargs(_database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency that yields a DB session. Caller must close."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Colonne opzionali aggiunte dopo la prima versione dello schema team_matches.
MATCH_OPTIONAL_COLUMNS: dict[str, str] = {
    "possession": "FLOAT",
    "pass_accuracy": "FLOAT",
    "shots": "INTEGER",
    "shots_on_target": "INTEGER",
    "corners": "INTEGER",
    "fouls": "INTEGER",
    "offsides": "INTEGER",
    "xg": "FLOAT",
    "passes": "INTEGER",
    "tackles": "INTEGER",
    "saves": "INTEGER",
}


def _migrate_team_matches() -> None:
    """
    Migrazione automatica per team_matches: aggiunge le colonne statistiche
    mancanti su tabelle create con lo schema iniziale (solo punteggi).

    Idempotente: controlla quali colonne esistono prima di agire.
    Se la tabella non esiste ancora, create_all() la crea con lo schema corretto.
    """
    insp = inspect(engine)
    if "team_matches" not in insp.get_table_names():
        return

    existing_cols = {col["name"] for col in insp.get_columns("team_matches")}

    added = []
    with engine.begin() as conn:
        for col_name, col_type in MATCH_OPTIONAL_COLUMNS.items():
            if col_name not in existing_cols:
                conn.execute(text(f"ALTER TABLE team_matches ADD COLUMN {col_name} {col_type}"))
                added.append(col_name)

    if added:
        logger.info("team_matches: aggiunte %s colonne: %s", len(added), added)
    else:
        logger.info("team_matches: schema già aggiornato, nessuna modifica")


def init_db() -> None:
    """
    Crea tutte le tabelle e applica migrazioni automatiche.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from app.models import (  # noqa: F401
        match,
        player,
        player_match_stats,
        team,
    )

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")

    try:
        _migrate_team_matches()
    except Exception as e:
        logger.exception("Errore durante migrazione team_matches: %s", e)
