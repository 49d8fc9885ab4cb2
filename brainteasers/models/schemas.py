"""
Request Schemas

Pydantic models validating the JSON bodies accepted by the REST and
WebSocket surfaces. Field names are camelCase on the wire.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreUpdateRequest(CamelModel):
    """Partial score update accepted by POST /api/scores."""
    best_score: Optional[int] = None
    words_solved: Optional[int] = None
    memory_sets_completed: Optional[int] = None
    category_progress: Optional[Dict[str, int]] = None

    def changes(self) -> Dict:
        """Only the fields the client actually supplied, keyed by API name."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ScorePatchRequest(ScoreUpdateRequest):
    """PATCH /api/scores also accepts the later counters."""
    number_sequences_solved: Optional[int] = None
    crosswords_completed: Optional[int] = None


class StartGameRequest(CamelModel):
    category_id: int
    word_count: int = Field(default=10, ge=1)


class StartMemoryRequest(CamelModel):
    category_id: int
    difficulty: int = Field(default=1, ge=1, le=3)
    card_count: int = Field(default=12, ge=2)

    @field_validator('card_count')
    @classmethod
    def card_count_must_be_even(cls, value: int) -> int:
        if value % 2:
            raise ValueError('cardCount must be an even number')
        return value


class StartNumberRequest(CamelModel):
    category_id: int


class StartCrosswordRequest(CamelModel):
    category_id: int
    difficulty: int = Field(default=1, ge=1)


class SessionActionRequest(CamelModel):
    """An engine action; any extra keys are passed to the engine as parameters."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='allow')

    action: str = Field(min_length=1)
    session_id: Optional[str] = None

    def params(self) -> Dict:
        return dict(self.model_extra or {})
