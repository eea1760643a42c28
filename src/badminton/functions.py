import logging
import random
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from badminton.models import Court, GeneratedMatch, InsufficientResources, Player, Team

logger = logging.getLogger(__name__)

Teams = Tuple[Team, Team]
Strategy = Callable[[List[Player], random.Random], Optional[Teams]]


def generate_matches(
    players: Sequence[Player],
    courts: Sequence[Court],
    mode: str,
    rng: Optional[random.Random] = None,
) -> List[GeneratedMatch]:
    """Pair queued players onto active courts, four per court.

    Players with the fewest games go first so everybody rotates through.
    Courts are used in the order given.
    """
    if rng is None:
        rng = random.Random()

    active_courts = [c for c in courts if c.is_active]
    available = [p for p in players if p.status == "Queue"]

    if not active_courts or len(available) < 4:
        raise InsufficientResources()

    # Fair rotation: fewest games first, ties keep roster order
    available.sort(key=lambda p: p.games_played)
    logger.debug("%d players in queue, %d active courts", len(available), len(active_courts))

    strategy = get_strategy(mode)
    matches = []
    max_matches = min(len(active_courts), len(available) // 4)

    for i in range(max_matches):
        court = active_courts[i]
        four_players = available[i * 4:i * 4 + 4]
        if len(four_players) != 4:
            break

        teams = strategy(four_players, rng)
        if teams is None:
            logger.warning("Could not form teams for court %s, skipping", court.name)
            continue

        team1, team2 = teams
        matches.append(GeneratedMatch(court=court, team1=team1, team2=team2))
        logger.debug(
            "%s: %s & %s vs %s & %s", court.name,
            team1.player1.name, team1.player2.name,
            team2.player1.name, team2.player2.name,
        )

    logger.info("Generated %d match(es) in %s mode", len(matches), mode)
    return matches


def balanced_teams(players: List[Player], rng: random.Random) -> Teams:
    """Best + weakest vs 2nd best + 2nd weakest."""
    ranked = sorted(players, key=lambda p: p.skill_value, reverse=True)
    return (
        Team(ranked[0], ranked[3]),
        Team(ranked[1], ranked[2]),
    )


def random_teams(players: List[Player], rng: random.Random) -> Teams:
    shuffled = list(players)
    rng.shuffle(shuffled)  # Fisher-Yates
    return (
        Team(shuffled[0], shuffled[1]),
        Team(shuffled[2], shuffled[3]),
    )


# (male, female, other) -> builder over the per-gender lists
_GENDER_RULES: Dict[Tuple[int, int, int], Callable[[list, list, list], Teams]] = {
    (2, 2, 0): lambda m, f, o: (Team(m[0], f[0]), Team(m[1], f[1])),
    (4, 0, 0): lambda m, f, o: (Team(m[0], m[1]), Team(m[2], m[3])),
    (0, 4, 0): lambda m, f, o: (Team(f[0], f[1]), Team(f[2], f[3])),
    (3, 1, 0): lambda m, f, o: (Team(m[0], m[1]), Team(m[2], f[0])),
    (1, 3, 0): lambda m, f, o: (Team(f[0], f[1]), Team(f[2], m[0])),
    (0, 0, 4): lambda m, f, o: (Team(o[0], o[1]), Team(o[2], o[3])),
    (1, 0, 3): lambda m, f, o: (Team(o[0], o[1]), Team(o[2], m[0])),
    (0, 1, 3): lambda m, f, o: (Team(o[0], o[1]), Team(o[2], f[0])),
    (2, 0, 2): lambda m, f, o: (Team(m[0], o[0]), Team(m[1], o[1])),
    (0, 2, 2): lambda m, f, o: (Team(f[0], o[0]), Team(f[1], o[1])),
    (1, 1, 2): lambda m, f, o: (Team(m[0], o[0]), Team(f[0], o[1])),
    (3, 0, 1): lambda m, f, o: (Team(m[0], m[1]), Team(m[2], o[0])),
    (0, 3, 1): lambda m, f, o: (Team(f[0], f[1]), Team(f[2], o[0])),
    (2, 1, 1): lambda m, f, o: (Team(m[0], f[0]), Team(m[1], o[0])),
    (1, 2, 1): lambda m, f, o: (Team(f[0], m[0]), Team(f[1], o[0])),
}


def gender_based_teams(players: List[Player], rng: random.Random) -> Teams:
    """Build teams from the gender mix of the group.

    Two men and two women always play mixed doubles. Other mixes pair
    same-gender players first, then fill with whoever is left. Within a
    gender, players keep their queue order.
    """
    males = [p for p in players if p.gender == "Male"]
    females = [p for p in players if p.gender == "Female"]
    others = [p for p in players if p.gender == "Other"]

    build = _GENDER_RULES.get((len(males), len(females), len(others)))
    if build is None:
        logger.warning("Unrecognised gender mix, falling back to random teams")
        return random_teams(players, rng)
    return build(males, females, others)


STRATEGIES: Dict[str, Strategy] = {
    "balanced": balanced_teams,
    "gender-based": gender_based_teams,
    "random": random_teams,
    "non-balanced": random_teams,
    "gender-specific": random_teams,
}

# no strategy of their own yet
RANDOM_ALIASES = ("non-balanced", "gender-specific")


def get_strategy(mode: str) -> Strategy:
    strategy = STRATEGIES.get(mode)
    if strategy is None:
        logger.warning("Unknown match mode %r, using random teams", mode)
        return random_teams
    if mode in RANDOM_ALIASES:
        logger.debug("Mode %r is an alias of random teams", mode)
    return strategy


def apply_generated_matches(players: Sequence[Player], matches: Sequence[GeneratedMatch]) -> List[Player]:
    """Return the roster with matched players moved to Playing and one more game played.

    Players are matched by id, so ids must be unique within the roster.
    """
    assigned = {p.id for m in matches for p in m.players}
    return [
        replace(p, status="Playing", games_played=p.games_played + 1) if p.id in assigned else p
        for p in players
    ]
