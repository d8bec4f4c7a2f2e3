"""Player ORM model. Anagrafica giocatore con codice posizione (GK, CB, CM, ST, ...)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    position = Column(String(16), nullable=True)
    jersey_num = Column(String(8), nullable=True)
    image_url = Column(String(512), nullable=True)

    team = relationship("Team", backref="players")
