"""
Player match statistics: una riga per giocatore per partita.
I contatori stagionali si ottengono sommando le righe; le percentuali salvate
(save_percentage, pass_completion) si mediano.
"""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class PlayerMatchStats(Base):
    __tablename__ = "player_match_stats"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True)
    match_id = Column(Integer, ForeignKey("team_matches.id", ondelete="CASCADE"), nullable=False, index=True)

    # --- ATTACKING ---
    goals = Column(Integer, nullable=True)
    assists = Column(Integer, nullable=True)
    shots = Column(Integer, nullable=True)
    shots_on_target = Column(Integer, nullable=True)
    chances_created = Column(Integer, nullable=True)
    dribbles_attempted = Column(Integer, nullable=True)
    dribbles_successful = Column(Integer, nullable=True)
    offsides = Column(Integer, nullable=True)

    # --- DEFENDING ---
    tackles = Column(Integer, nullable=True)
    interceptions = Column(Integer, nullable=True)
    clearances = Column(Integer, nullable=True)

    # --- GOALKEEPING ---
    saves = Column(Integer, nullable=True)
    clean_sheets = Column(Integer, nullable=True)
    save_percentage = Column(Float, nullable=True)

    # --- GENERAL ---
    pass_completion = Column(Float, nullable=True)
    minutes_played = Column(Integer, nullable=True)
    yellow_cards = Column(Integer, nullable=True)
    red_cards = Column(Integer, nullable=True)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    match = relationship("Match", backref="player_stats")

    __table_args__ = (
        Index("ix_player_match_stats_player_match", "player_id", "match_id", unique=True),
    )
