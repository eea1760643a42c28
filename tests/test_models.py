"""
Unit tests for the data models.
"""
from badminton.models import (
    SKILL_CATEGORIES, Court, GeneratedMatch, InsufficientResources, Player, Team,
)


class TestPlayer:
    """Tests for the Player model."""

    def test_defaults(self):
        player = Player(id="a", name="Ann")
        assert player.skill_category == "Intermediate"
        assert player.gender == "Male"
        assert player.games_played == 0
        assert player.status == "Queue"

    def test_skill_values_are_ordered(self):
        values = [Player(id=s, name=s, skill_category=s).skill_value for s in SKILL_CATEGORIES]
        assert values == [0, 1, 2]

    def test_unknown_skill_ranks_as_pro(self):
        assert Player(id="x", name="X", skill_category="Expert").skill_value == 2


class TestMatch:
    """Tests for Team and GeneratedMatch."""

    def test_match_players(self):
        a, b, c, d = [Player(id=i, name=i) for i in "abcd"]
        match = GeneratedMatch(court=Court(id="c1", name="Court 1"), team1=Team(a, b), team2=Team(c, d))
        assert [p.id for p in match.players] == ["a", "b", "c", "d"]
        assert match.team1.players == [a, b]


class TestErrors:
    """Tests for the error types."""

    def test_insufficient_resources_message(self):
        err = InsufficientResources()
        assert str(err) == "Need at least 4 players in queue and 1 active court"
        assert err.message == str(err)
