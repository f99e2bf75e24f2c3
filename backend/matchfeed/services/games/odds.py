from typing import Optional

from matchfeed.models import Game, Odds

# Initial price ranges
WIN_RANGE = (1.5, 3.5)
DRAW_RANGE = (2.0, 3.0)

# Adjustment bands. The three draw bounds are independent of one another.
WIN_FLOOR = 1.20
WIN_CEILING = 5.0
DRAW_FLOOR = 1.50
LATE_DRAW_CEILING = 1.80

LEADER_SHORTEN = 0.3
TRAILER_DRIFT = 0.5
LEVEL_GOAL_SHORTEN = 0.2
LATE_DRAW_DRIFT = 0.4
LATE_GAME_MINUTE = 80


def initial_odds(rng) -> Odds:
    return Odds(
        home_win=round(rng.uniform(*WIN_RANGE), 2),
        draw=round(rng.uniform(*DRAW_RANGE), 2),
        away_win=round(rng.uniform(*WIN_RANGE), 2),
    )


def _shorten(price: float, delta: float, floor: float) -> float:
    return round(max(floor, price - delta), 2)


def _lengthen(price: float, delta: float, ceiling: float) -> float:
    return round(min(ceiling, price + delta), 2)


def update_odds(game: Game, event: Optional[str]) -> None:
    """Adjust ``game.odds`` in place after a tick.

    A goal shortens the leader and pushes out the trailer, or shortens the
    draw when the goal levels the match. Separately, a level match from
    minute 80 has its draw price moved up by 0.4 but never above 1.80.
    """
    odds = game.odds
    if event == 'goal':
        home, away = game.score
        if home > away:
            odds.home_win = _shorten(odds.home_win, LEADER_SHORTEN, WIN_FLOOR)
            odds.away_win = _lengthen(odds.away_win, TRAILER_DRIFT, WIN_CEILING)
        elif away > home:
            odds.away_win = _shorten(odds.away_win, LEADER_SHORTEN, WIN_FLOOR)
            odds.home_win = _lengthen(odds.home_win, TRAILER_DRIFT, WIN_CEILING)
        else:
            odds.draw = _shorten(odds.draw, LEVEL_GOAL_SHORTEN, DRAW_FLOOR)

    if game.minute >= LATE_GAME_MINUTE and game.is_level:
        odds.draw = _lengthen(odds.draw, LATE_DRAW_DRIFT, LATE_DRAW_CEILING)
