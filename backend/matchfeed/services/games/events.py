from matchfeed.models import EventOutcome, Game

GOAL = 'goal'
RED_CARD = 'red_card'
YELLOW_CARD = 'yellow_card'
NO_EVENT = 'no_event'

EVENT_KINDS = (GOAL, RED_CARD, YELLOW_CARD, NO_EVENT)
SIDES = ('home', 'away')

_CARD_MESSAGES = {
    RED_CARD: 'A player received a Red Card!',
    YELLOW_CARD: 'A player received a Yellow Card!',
}


def determine_event(game: Game, rng) -> EventOutcome:
    """Pick a random match event for ``game``.

    Every kind is equally likely regardless of minute or score. Goals and
    cards choose a side uniformly. Only a goal changes the score, and the
    new score is returned rather than written back to the game.
    """
    kind = rng.choice(EVENT_KINDS)
    home, away = game.score

    if kind == GOAL:
        if rng.choice(SIDES) == 'home':
            return EventOutcome(GOAL, game.home_team, f'{game.home_team} scored!', home + 1, away)
        return EventOutcome(GOAL, game.away_team, f'{game.away_team} scored!', home, away + 1)

    if kind in _CARD_MESSAGES:
        team = game.home_team if rng.choice(SIDES) == 'home' else game.away_team
        return EventOutcome(kind, team, _CARD_MESSAGES[kind], home, away)

    return EventOutcome(None, None, 'No significant event', home, away)
