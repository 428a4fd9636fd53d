"""AI tutor API: generated questions, answer checks and free-form questions."""

from fastapi import APIRouter, Depends

from edustocks.api.deps import get_ai_trainer_service, get_current_user
from edustocks.api.schemas import (
    AnswerEvaluationResponse,
    AnswerRequest,
    AskRequest,
    AskResponse,
    GeneratedQuestionResponse,
    QuestionRequest,
)
from edustocks.auth import VerifiedUser
from edustocks.services import AITrainerService

router = APIRouter(prefix="/api/ai-trainer", tags=["ai-trainer"])


@router.post("/question", response_model=GeneratedQuestionResponse)
def generate_question(
    data: QuestionRequest,
    user: VerifiedUser = Depends(get_current_user),
    service: AITrainerService = Depends(get_ai_trainer_service),
):
    return GeneratedQuestionResponse.from_question(service.generate_question(data.level, data.topic))


@router.post("/answer", response_model=AnswerEvaluationResponse)
def check_answer(
    data: AnswerRequest,
    user: VerifiedUser = Depends(get_current_user),
    service: AITrainerService = Depends(get_ai_trainer_service),
):
    """Have the tutor judge a chosen option; nothing is recorded against progress."""
    evaluation = service.check_answer(data.question_id, data.answer)
    return AnswerEvaluationResponse.from_evaluation(evaluation)


@router.post("/ask", response_model=AskResponse)
def ask(
    data: AskRequest,
    user: VerifiedUser = Depends(get_current_user),
    service: AITrainerService = Depends(get_ai_trainer_service),
):
    return AskResponse.from_answer(service.answer_query(data.query, data.level))
