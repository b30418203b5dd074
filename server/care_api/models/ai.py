"""Skin analysis and speech models."""
from typing import Literal

from pydantic import BaseModel, Field

SkinType = Literal["Normal", "Oily", "Dry", "Combination", "Sensitive"]


class SkinAnswers(BaseModel):
    """Questionnaire sent along with the skin photo."""

    skin_type: SkinType = "Normal"
    sensitivity: Literal["Yes", "No"] = "No"
    concerns: list[str] = Field(default_factory=list)

    def as_prompt_text(self) -> str:
        return (
            f"Skin Type: {self.skin_type}, Sensitivity: {self.sensitivity}, "
            f"Concerns: {', '.join(self.concerns)}"
        )


class SkinAnalysisResponse(BaseModel):
    """AI-written skin assessment."""

    analysis: str
    generated_at: str


class SpeakRequest(BaseModel):
    """Text to read aloud."""

    text: str = Field(min_length=1, max_length=1000)


class SpeechResponse(BaseModel):
    """Synthesized speech clip."""

    text: str
    audio_base64: str
    mime_type: str


class SpokenReminders(BaseModel):
    """Today's reminders with one clip per message."""

    messages: list[str]
    clips: list[SpeechResponse]
