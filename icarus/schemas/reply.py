"""Reply schemas for decoding maze host responses."""

import logging
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from icarus.core.maze_model import Survey

logger = logging.getLogger(__name__)


class SurveySchema(BaseModel):
    """Schema for the walls around a cell."""

    model_config = ConfigDict(populate_by_name=True)

    top: bool = Field(False, alias="Top")
    right: bool = Field(False, alias="Right")
    bottom: bool = Field(False, alias="Bottom")
    left: bool = Field(False, alias="Left")

    def to_survey(self) -> Survey:
        return Survey(top=self.top, right=self.right, bottom=self.bottom, left=self.left)


class Reply(BaseModel):
    """Schema for every /awake and /move response."""

    model_config = ConfigDict(populate_by_name=True)

    survey: SurveySchema = Field(default_factory=SurveySchema, alias="Survey")
    victory: bool = Field(False, alias="Victory")
    message: str = Field("", alias="Message")


def parse_reply(content: Union[bytes, str]) -> Reply:
    """
    Decode a host response body.

    Malformed bodies decode to the zero-value Reply: all walls open,
    no victory, empty message.
    """
    try:
        return Reply.model_validate_json(content)
    except ValidationError as e:
        logger.warning(f"Malformed reply from host ({e.error_count()} errors): {content[:200]!r}")
        return Reply()
