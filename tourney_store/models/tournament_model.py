from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

class MatchType(str, Enum):
    SOLO = "SOLO"
    DUO = "DUO"
    SQUAD = "SQUAD"

class Entry(BaseModel):
    user_id: str  # References User.id
    names: List[str] = Field(default_factory=list)  # In-game names of the team members
    match_type: MatchType
    entry_paid: int  # Fee deducted from the owner's balance when the entry was made

    class Config:
        frozen = True
        use_enum_values = True

class Tournament(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    game_type: str = "BR MATCH"  # e.g., "BR MATCH", "CLASH SQUAD", "LONE WOLF"
    map_name: Optional[str] = None
    match_type: MatchType = MatchType.SOLO
    entry_fee: int = 0
    prize_pool: int = 0
    per_kill: int = 0
    start_time: Optional[str] = None  # Display string, owned by the presentation layer
    room_id: Optional[str] = None
    room_password: Optional[str] = None
    status: str = "UPCOMING"  # e.g., "UPCOMING", "LIVE", "COMPLETED"
    players: List[Entry] = Field(default_factory=list)

    class Config:
        frozen = True
        use_enum_values = True
        extra = "allow"  # Keep any extra presentation fields untouched
