from dataclasses import dataclass
from typing import List

SKILL_CATEGORIES = ("Starter", "Intermediate", "Pro")
GENDERS = ("Male", "Female", "Other")
PLAYER_STATUSES = ("Queue", "Playing", "Break")
MATCH_MODES = ("balanced", "non-balanced", "gender-based", "gender-specific", "random")

SKILL_VALUES = {"Starter": 0, "Intermediate": 1, "Pro": 2}


class BadmintonError(Exception):
    """Base error for the pairing engine."""


class InsufficientResources(BadmintonError):
    """Raised when there are not enough queued players or active courts."""

    def __init__(self, message: str = "Need at least 4 players in queue and 1 active court"):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    skill_category: str = "Intermediate"
    gender: str = "Male"
    games_played: int = 0
    status: str = "Queue"  # Queue, Playing, Break

    @property
    def skill_value(self) -> int:
        # unknown categories rank with Pro
        return SKILL_VALUES.get(self.skill_category, 2)


@dataclass(frozen=True)
class Court:
    id: str
    name: str
    is_active: bool = True


@dataclass(frozen=True)
class Team:
    player1: Player
    player2: Player

    @property
    def players(self) -> List[Player]:
        return [self.player1, self.player2]


@dataclass
class GeneratedMatch:
    court: Court
    team1: Team
    team2: Team

    @property
    def players(self) -> List[Player]:
        return self.team1.players + self.team2.players
