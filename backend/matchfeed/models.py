import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

STATUS_SCHEDULED = 'scheduled'
STATUS_IN_PROGRESS = 'in_progress'
STATUS_FINISHED = 'finished'

TEAM_POOL = tuple(f'Team{i}' for i in range(50))
_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_game_id(rng, taken, length=6):
    """Generate a game id not present in ``taken``."""
    while True:
        game_id = 'G' + ''.join(rng.choices(_ID_ALPHABET, k=length))
        if game_id not in taken:
            return game_id


def iso_timestamp(epoch_ms: int) -> str:
    moment = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class Odds:
    home_win: float
    draw: float
    away_win: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'home_win': self.home_win,
            'draw': self.draw,
            'away_win': self.away_win,
        }


@dataclass
class Game:
    game_id: str
    home_team: str
    away_team: str
    start_time: int  # epoch milliseconds
    odds: Odds
    home_score: int = 0
    away_score: int = 0
    status: str = STATUS_SCHEDULED
    minute: int = 0

    @property
    def score(self) -> Tuple[int, int]:
        return self.home_score, self.away_score

    @property
    def score_line(self) -> str:
        return f'{self.home_score}-{self.away_score}'

    @property
    def is_level(self) -> bool:
        return self.home_score == self.away_score

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game_id': self.game_id,
            'home_team': self.home_team,
            'away_team': self.away_team,
            'score': self.score_line,
            'status': self.status,
            'minute': self.minute,
            'startTime': self.start_time,
            'odds': self.odds.to_dict(),
        }

    def lifecycle_payload(self, message: str, now_ms: int) -> Dict[str, Any]:
        """Status-change notice. Carries no score or odds."""
        return {
            'game_id': self.game_id,
            'status': self.status,
            'message': message,
            'timestamp': iso_timestamp(now_ms),
        }

    def update_payload(self, event: Optional[str], event_team: Optional[str],
                       message: str, now_ms: int) -> Dict[str, Any]:
        return {
            'game_id': self.game_id,
            'home_team': self.home_team,
            'away_team': self.away_team,
            'score': self.score_line,
            'status': self.status,
            'minute': self.minute,
            'event': event,
            'event_team': event_team,
            'message': message,
            'timestamp': iso_timestamp(now_ms),
            'odds': self.odds.to_dict(),
        }


@dataclass(frozen=True)
class EventOutcome:
    """Result of one simulated match event; the caller commits the score."""
    event: Optional[str]
    event_team: Optional[str]
    message: str
    home_score: int
    away_score: int

    @property
    def score(self) -> Tuple[int, int]:
        return self.home_score, self.away_score

