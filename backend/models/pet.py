from enum import Enum
from pydantic import BaseModel, Field, field_validator

from models.activity import ActivitySummary


STATE_VERSION = 1
DEFAULT_MOOD = 5
MOOD_MIN = 0
MOOD_MAX = 100


class Evolution(str, Enum):
    LONELY = "Lonely"
    PIONEER = "Pioneer"
    GUARDIAN = "Guardian"
    BARD = "Bard"
    VOID = "Void"


class PetState(BaseModel):
    version: int = 0
    last_sync: str = ""         # ISO-8601, "" means never synced
    mood: int = Field(default=DEFAULT_MOOD, ge=MOOD_MIN, le=MOOD_MAX)
    kindness: int = Field(default=0, ge=0)
    logic_shards: int = Field(default=0, ge=0)
    evolution: Evolution = Evolution.LONELY
    activity: ActivitySummary = Field(default_factory=ActivitySummary)

    @field_validator("evolution", mode="before")
    @classmethod
    def _blank_is_lonely(cls, value):
        # Older state files were written with an empty label before the first feed
        return value or Evolution.LONELY
