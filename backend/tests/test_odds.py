import pytest

from conftest import START_MS
from matchfeed.models import Game, Odds
from matchfeed.services.games.odds import update_odds


def _game(home, away, minute=30, odds=None):
    return Game('G1', 'Lions', 'Tigers', START_MS, odds or Odds(2.0, 2.5, 2.0),
                home_score=home, away_score=away, status='in_progress', minute=minute)


def test_home_lead_shortens_home_and_drifts_away():
    game = _game(2, 1)
    update_odds(game, 'goal')
    assert game.odds.home_win == pytest.approx(1.7)
    assert game.odds.away_win == pytest.approx(2.5)
    assert game.odds.draw == pytest.approx(2.5)


def test_away_lead_mirrors():
    game = _game(0, 1)
    update_odds(game, 'goal')
    assert game.odds.away_win == pytest.approx(1.7)
    assert game.odds.home_win == pytest.approx(2.5)


def test_equalizer_shortens_draw_to_floor():
    game = _game(1, 1, odds=Odds(2.0, 1.6, 2.0))
    update_odds(game, 'goal')
    assert game.odds.draw == pytest.approx(1.5)
    update_odds(game, 'goal')
    assert game.odds.draw == pytest.approx(1.5)


def test_non_goal_events_leave_odds_alone():
    game = _game(1, 0)
    for event in ('red_card', 'yellow_card', None):
        update_odds(game, event)
    assert game.odds == Odds(2.0, 2.5, 2.0)


def test_hundred_home_goals_settle_on_floor():
    game = _game(0, 0, odds=Odds(2.0, 2.5, 2.0))
    for _ in range(100):
        game.home_score += 1
        update_odds(game, 'goal')
        assert game.odds.home_win >= 1.20
        assert game.odds.away_win <= 5.0
    assert game.odds.home_win == pytest.approx(1.20)
    assert game.odds.away_win == pytest.approx(5.0)


def test_late_level_game_raises_draw_to_cap():
    game = _game(0, 0, minute=85, odds=Odds(2.0, 1.40, 2.0))
    update_odds(game, None)
    assert game.odds.draw == pytest.approx(1.80)
    update_odds(game, 'goal')
    assert game.odds.draw == pytest.approx(1.80)


def test_late_adjustment_needs_level_score():
    game = _game(1, 0, minute=85, odds=Odds(2.0, 1.40, 2.0))
    update_odds(game, None)
    assert game.odds.draw == pytest.approx(1.40)


def test_late_adjustment_needs_minute_80():
    game = _game(0, 0, minute=79, odds=Odds(2.0, 1.40, 2.0))
    update_odds(game, None)
    assert game.odds.draw == pytest.approx(1.40)
