"""
Team match ORM model: una riga per partita della squadra, punteggi + statistiche di squadra.
Le colonne statistiche sono opzionali: NULL = "non registrato", diverso da 0.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base


class Match(Base):
    __tablename__ = "team_matches"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    opponent_name = Column(String(255), nullable=False)
    date = Column(Date, nullable=True, index=True)
    status = Column(String(32), nullable=False, default="completed")

    team_score = Column(Integer, nullable=False, default=0)
    opponent_score = Column(Integer, nullable=False, default=0)

    possession = Column(Float, nullable=True)
    pass_accuracy = Column(Float, nullable=True)
    shots = Column(Integer, nullable=True)
    shots_on_target = Column(Integer, nullable=True)
    corners = Column(Integer, nullable=True)
    fouls = Column(Integer, nullable=True)
    offsides = Column(Integer, nullable=True)
    xg = Column(Float, nullable=True)
    passes = Column(Integer, nullable=True)
    tackles = Column(Integer, nullable=True)
    saves = Column(Integer, nullable=True)

    team = relationship("Team", backref="matches")
