"""
AI Router

HTTP surface for the tutoring assistant: free-text answers, grounded
answers for the signed-in user, and writing/speaking grading.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.envelope import Envelope, ok
from app.core.security import verify_token
from app.services.ai import AIService, build_context_map, ContextAssembler, Category
from app.services.ai.context import build_no_context_map
from app.services.ai.classifier import classify_prompt
from app.services.ai.language import detect_language
from app.services.ai.providers import DatabaseUserProvider, DatabaseClassProvider
from app.services.llm.client import CompletionClient, get_completion_client

router = APIRouter()


# Schemas
class PromptRequest(BaseModel):
    prompt: str


class WritingGradeRequest(BaseModel):
    question: str = Field(min_length=1)
    submission: str = Field(min_length=1)


class SpeakingGradeRequest(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class ClassificationResponse(BaseModel):
    category: str
    resolved_category: Category
    language: str


# Dependencies
async def get_current_identity(request: Request) -> str:
    """Return the user id from the bearer token."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    token = auth_header.split(" ")[1]
    payload = verify_token(token, "access")
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return payload.sub


def get_ai_service(
    db: AsyncSession = Depends(get_db),
    completion: CompletionClient = Depends(get_completion_client),
) -> AIService:
    providers = build_context_map(DatabaseUserProvider(db), DatabaseClassProvider(db))
    return AIService(completion, ContextAssembler(providers))


def get_ungrounded_service(
    completion: CompletionClient = Depends(get_completion_client),
) -> AIService:
    """Service for routes that never read platform data; no database session."""
    return AIService(completion, ContextAssembler(build_no_context_map()))


CurrentIdentity = Annotated[str, Depends(get_current_identity)]
Service = Annotated[AIService, Depends(get_ai_service)]
UngroundedService = Annotated[AIService, Depends(get_ungrounded_service)]


# Endpoints
@router.post("/generate-text", response_model=Envelope, status_code=status.HTTP_201_CREATED)
async def generate_text(
    data: PromptRequest,
    identity: CurrentIdentity,
    service: UngroundedService,
):
    """Answer a prompt without platform context."""
    text = await service.generate_text(data.prompt)
    return ok(text, "Created successfully", status.HTTP_201_CREATED)


@router.post(
    "/generate-text-with-context",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
)
async def generate_text_with_context(
    data: PromptRequest,
    identity: CurrentIdentity,
    service: Service,
):
    """Answer a prompt grounded in the signed-in user's profile or classes."""
    text = await service.generate_text_with_context(data.prompt, identity)
    return ok(text, "Created successfully", status.HTTP_201_CREATED)


@router.post("/classify", response_model=Envelope)
async def classify(
    data: PromptRequest,
    identity: CurrentIdentity,
    completion: CompletionClient = Depends(get_completion_client),
):
    """Show how a prompt would be routed, without answering it."""
    label = await classify_prompt(data.prompt, completion)
    result = ClassificationResponse(
        category=label.value if isinstance(label, Category) else label,
        resolved_category=Category.from_label(label),
        language=detect_language(data.prompt).value,
    )
    return ok(result.model_dump(mode="json"), "Fetched successfully")


@router.post("/grade/writing", response_model=Envelope, status_code=status.HTTP_201_CREATED)
async def grade_writing(
    data: WritingGradeRequest,
    identity: CurrentIdentity,
    service: UngroundedService,
):
    """Grade a writing submission against the writing rubric."""
    text = await service.grade_writing_submission(data.submission, data.question)
    return ok(text, "Created successfully", status.HTTP_201_CREATED)


@router.post("/grade/speaking", response_model=Envelope, status_code=status.HTTP_201_CREATED)
async def grade_speaking(
    data: SpeakingGradeRequest,
    identity: CurrentIdentity,
    service: UngroundedService,
):
    """Grade a speaking answer or transcript against the speaking rubric."""
    text = await service.grade_speaking_submission(data.question, data.answer)
    return ok(text, "Created successfully", status.HTTP_201_CREATED)
