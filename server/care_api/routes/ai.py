"""AI-backed skin analysis and speech routes.

Provider failures surface as 502/503/504 so clients can tell a missing
key from an upstream outage.
"""
import logging
import sqlite3
from datetime import date, datetime, timezone
from typing import Literal, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile

from ..config import Settings
from ..dependencies import get_app_settings, get_care_ai, get_current_user, get_db
from ..models.ai import (
    SkinAnalysisResponse,
    SkinAnswers,
    SkinType,
    SpeakRequest,
    SpeechResponse,
    SpokenReminders,
)
from ..security import UserSession
from ..services.genai import AIServiceError, AIServiceNotConfigured, AIServiceTimeout, CareAI
from ..services.uploads import read_upload
from .dashboard import build_reminders

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI Assistant"])


def _to_http_error(error: AIServiceError) -> HTTPException:
    if isinstance(error, AIServiceNotConfigured):
        return HTTPException(status_code=503, detail="AI service is not configured")
    if isinstance(error, AIServiceTimeout):
        return HTTPException(status_code=504, detail="AI service timed out")
    return HTTPException(status_code=502, detail=f"AI service error: {error}")


async def _speak(ai: CareAI, text: str) -> SpeechResponse:
    try:
        clip = await ai.synthesize_speech(text)
    except AIServiceError as e:
        raise _to_http_error(e)
    return SpeechResponse(text=text, audio_base64=clip.audio_base64, mime_type=clip.mime_type)


@router.post("/skin-analysis", response_model=SkinAnalysisResponse)
async def analyze_skin(
    image: UploadFile = File(...),
    skin_type: SkinType = Form(default="Normal"),
    sensitivity: Literal["Yes", "No"] = Form(default="No"),
    concerns: list[str] = Form(default=[]),
    user: UserSession = Depends(get_current_user),
    ai: CareAI = Depends(get_care_ai),
    settings: Settings = Depends(get_app_settings),
):
    """Analyze a skin photo together with the questionnaire answers."""
    if not (image.content_type or "").startswith("image/"):
        raise HTTPException(status_code=400, detail="Upload must be an image")

    data = await read_upload(image, settings.max_upload_mb * 1024 * 1024)
    if not data:
        raise HTTPException(status_code=400, detail="No image uploaded")

    answers = SkinAnswers(skin_type=skin_type, sensitivity=sensitivity, concerns=concerns)

    try:
        analysis = await ai.analyze_skin(data, image.content_type, answers.as_prompt_text())
    except AIServiceError as e:
        logger.error(f"[GENAI] Skin analysis failed for user {user.id}: {e}")
        raise _to_http_error(e)

    return SkinAnalysisResponse(
        analysis=analysis,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/speak", response_model=SpeechResponse, dependencies=[Depends(get_current_user)])
async def speak(body: SpeakRequest, ai: CareAI = Depends(get_care_ai)):
    """Read a short text aloud."""
    return await _speak(ai, body.text)


@router.post("/speak/reminders", response_model=SpokenReminders)
async def speak_reminders(
    today: Optional[date] = Query(default=None, description="Caller's local date"),
    user: UserSession = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
    ai: CareAI = Depends(get_care_ai),
):
    """Speak today's selected reminders, one clip per message."""
    reminders = build_reminders(conn, user.id, today or date.today())
    clips = [await _speak(ai, message) for message in reminders.messages]
    return SpokenReminders(messages=reminders.messages, clips=clips)
