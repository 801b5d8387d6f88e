"""Quiz request/response models.

The user id is accepted on input as `userFid` or `userId` and is always stored
and returned as `userFid`, the field name existing leaderboard data uses.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional


class QuizSubmission(BaseModel):
    """Raw submit body. Required fields are checked by the repository so a
    missing one answers 400 rather than pydantic's 422."""
    model_config = ConfigDict(populate_by_name=True)

    user_fid: Optional[int] = Field(None, validation_alias=AliasChoices("userFid", "userId", "user_fid"))
    personality_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("personalityType", "personality_type")
    )
    score: Optional[int] = None
    timestamp: Optional[int] = None


class QuizResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_fid: int = Field(..., alias="userFid")
    personality_type: str = Field(..., alias="personalityType")
    score: int
    timestamp: int = Field(..., description="Epoch milliseconds")


class SubmitResponse(BaseModel):
    success: bool


class ScoreRequest(BaseModel):
    answers: List[str]


class ScoreResponse(BaseModel):
    personalityType: str
    score: int
    title: str
    description: str


class QuestionOption(BaseModel):
    text: str
    type: str


class QuizQuestion(BaseModel):
    id: int
    question: str
    options: List[QuestionOption]


class PersonalityTypeInfo(BaseModel):
    type: str
    title: str
    tagline: str
    description: str
    compatible: List[str]
