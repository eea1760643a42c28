from dataclasses import asdict
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from badminton.models import Court, GeneratedMatch, Player


class PlayerSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    skill_category: str = Field("Intermediate", alias="skillCategory")
    gender: str = "Male"
    games_played: int = Field(0, ge=0, alias="gamesPlayed")
    status: str = "Queue"

    def to_player(self) -> Player:
        return Player(**self.model_dump())

    @classmethod
    def from_player(cls, player: Player) -> "PlayerSchema":
        return cls(**asdict(player))


class CourtSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    is_active: bool = Field(True, alias="isActive")

    def to_court(self) -> Court:
        return Court(**self.model_dump())

    @classmethod
    def from_court(cls, court: Court) -> "CourtSchema":
        return cls(**asdict(court))


class MatchSchema(BaseModel):
    court: CourtSchema
    team1: List[PlayerSchema]
    team2: List[PlayerSchema]

    @classmethod
    def from_match(cls, match: GeneratedMatch) -> "MatchSchema":
        return cls(
            court=CourtSchema.from_court(match.court),
            team1=[PlayerSchema.from_player(p) for p in match.team1.players],
            team2=[PlayerSchema.from_player(p) for p in match.team2.players],
        )


class GenerateMatchesRequest(BaseModel):
    mode: Optional[str] = None  # falls back to DEFAULT_MATCH_MODE
    players: List[PlayerSchema]
    courts: List[CourtSchema]


class GenerateMatchesResponse(BaseModel):
    matches: List[MatchSchema]
    players: List[PlayerSchema]
