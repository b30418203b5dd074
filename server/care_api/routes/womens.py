"""Women's care routes: cycle prediction and PCOS risk screen."""
from fastapi import APIRouter, Depends

from care_rules import assess_pcos_risk, predict_next_period
from care_rules.womens_health import PCOS_SYMPTOMS

from ..dependencies import get_current_user
from ..models.womens import CycleRequest, CycleResponse, PcosAnswers, PcosResponse

router = APIRouter(
    prefix="/api/womens",
    tags=["Women's Care"],
    dependencies=[Depends(get_current_user)],
)


@router.post("/cycle/predict", response_model=CycleResponse)
async def predict_cycle(body: CycleRequest):
    """Predict the next period from the last start date and cycle length."""
    prediction = predict_next_period(body.last_period_start, body.cycle_length, body.period_length)
    return CycleResponse(
        next_period_start=prediction.next_start,
        expected_end=prediction.expected_end,
    )


@router.post("/pcos/assess", response_model=PcosResponse)
async def assess_pcos(body: PcosAnswers):
    """Band PCOS risk by the number of reported symptoms."""
    answers = body.model_dump()
    return PcosResponse(
        risk=assess_pcos_risk(answers).value,
        symptom_count=sum(1 for symptom in PCOS_SYMPTOMS if answers[symptom]),
    )
