"""
AI Router - HTTP endpoints for AI content generation.

This router only validates request bodies and relays the generation
client's results. The client never fails, so every endpoint answers 200
with {"success": true, "data": ...}; when the provider is unavailable the
data is fallback content of the same shape.

Endpoints:
- POST /api/ai/website-content
- POST /api/ai/seo
- POST /api/ai/chat
- POST /api/ai/design
- GET  /api/ai/status
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.ai.content import GenerationClient
from app.deps import get_generation_client


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


# ---------------------------------------------------------------------------
# REQUEST SCHEMAS
# ---------------------------------------------------------------------------

class WebsiteContentRequest(BaseModel):
    """
    Example:
    {
        "business_type": "מסעדה",
        "description": "מסעדה איטלקית בתל אביב"
    }
    """
    business_type: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    options: Dict[str, str] = Field(default_factory=dict)


class SEOContentRequest(BaseModel):
    business_type: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    target_keywords: List[str] = Field(default_factory=list)


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)
    context: Dict[str, str] = Field(default_factory=dict)


class DesignSuggestionsRequest(BaseModel):
    business_type: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    preferences: Dict[str, str] = Field(default_factory=dict)


def _success(result: BaseModel) -> Dict[str, Any]:
    return {"success": True, "data": result.model_dump()}


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/website-content")
async def generate_website_content(
    request: WebsiteContentRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Generate website copy for a business."""
    result = await client.generate_website_content(
        request.business_type, request.description, request.options
    )
    return _success(result)


@router.post("/seo")
async def generate_seo_content(
    request: SEOContentRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Generate SEO meta content for a business."""
    result = await client.generate_seo_content(
        request.business_type, request.description, request.target_keywords
    )
    return _success(result)


@router.post("/chat")
async def chat(
    request: ChatRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Ask the website-building assistant a question."""
    result = await client.chat_assistant(request.message, request.context)
    return _success(result)


@router.post("/design")
async def generate_design_suggestions(
    request: DesignSuggestionsRequest,
    client: GenerationClient = Depends(get_generation_client),
):
    """Suggest a design direction for a business website."""
    result = await client.generate_design_suggestions(
        request.business_type, request.description, request.preferences
    )
    return _success(result)


@router.get("/status")
async def ai_status(client: GenerationClient = Depends(get_generation_client)):
    """Report whether real AI generation is enabled."""
    return {"success": True, "data": {"ready": client.ready}}
