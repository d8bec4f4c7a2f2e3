import os
from datetime import date

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.models import Match, Player, PlayerMatchStats, Team


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def seeded(db):
    """Una squadra con 4 partite (una non conclusa) e tre giocatori."""
    team = Team(id=1, name="Rovers")
    db.add(team)
    db.add(Team(id=2, name="Empty FC"))
    matches = [
        Match(id=1, team_id=1, opponent_name="A", date=date(2024, 8, 10), team_score=2, opponent_score=1,
              possession=60, pass_accuracy=85, shots=12, shots_on_target=6),
        Match(id=2, team_id=1, opponent_name="B", date=date(2024, 8, 17), team_score=1, opponent_score=0,
              possession=None, pass_accuracy=None, shots=8, shots_on_target=2),
        Match(id=3, team_id=1, opponent_name="C", date=date(2024, 8, 24), team_score=0, opponent_score=2,
              possession=50, pass_accuracy=80),
        Match(id=4, team_id=1, opponent_name="D", date=date(2024, 8, 31), status="scheduled"),
    ]
    db.add_all(matches)
    db.add_all([
        Player(id=10, team_id=1, name="Keeper", position="GK", jersey_num="1"),
        Player(id=11, team_id=1, name="Striker", position="ST", jersey_num="9"),
        Player(id=12, team_id=1, name="Utility", position="st", jersey_num="14"),
    ])
    db.add_all([
        PlayerMatchStats(player_id=10, match_id=1, saves=3, clean_sheets=0, save_percentage=75, clearances=1,
                         minutes_played=90),
        PlayerMatchStats(player_id=10, match_id=2, saves=5, clean_sheets=1, save_percentage=100, clearances=2,
                         minutes_played=90),
        PlayerMatchStats(player_id=11, match_id=1, goals=2, shots=4, shots_on_target=3, minutes_played=90),
        PlayerMatchStats(player_id=11, match_id=2, goals=1, shots=3, shots_on_target=2, minutes_played=80,
                         yellow_cards=1),
        PlayerMatchStats(player_id=11, match_id=3, goals=0, shots=None, shots_on_target=None, minutes_played=45),
    ])
    db.commit()
    return db
