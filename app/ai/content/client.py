"""
Generation Client - AI website content with guaranteed results.

This is the only entry point the HTTP layer uses for AI content. Each of the
four operations follows the same pipeline:

    ready? ──no──────────────────────────────► fallback catalog
      │yes
      ▼
    build prompt ─► provider call ──failed───► fallback catalog
                           │answered
                           ▼
                     structured parse ─failed─► partial result from reply
                           │ok
                           ▼
                     parsed result

No operation raises: provider errors, timeouts and malformed replies are
logged and turned into content of the requested shape.

Usage:
======
    from app.ai.content import generation_client

    content = await generation_client.generate_website_content(
        "מסעדה", "מסעדה איטלקית בתל אביב"
    )
    print(content.headline)
"""

import logging
from typing import Any, Mapping, Optional, Sequence
from uuid import uuid4

from app.core.config import settings
from app.ai.content.fallbacks import get_fallback
from app.ai.content.prompts import build_provider_request
from app.ai.content.resolver import build_partial_result, resolve_reply
from app.ai.content.schemas import (
    ChatReply,
    ContentKind,
    ContentResult,
    DesignSuggestions,
    SEOContent,
    ServiceConfig,
    WebsiteContent,
)
from app.ai.monitoring import ai_logger
from app.ai.providers.base import AIProvider
from app.ai.providers.openai_provider import OpenAIProvider

logger = logging.getLogger("webmaster.ai.content.client")


class GenerationClient:
    """
    Content generation client with built-in fallbacks.

    The client's ServiceConfig is fixed at construction. When it is not
    ready (no credential), no provider is created and every operation
    answers from the fallback catalog without any outbound call.

    Args:
        config: Provider configuration (default: from settings)
        provider: Provider to call (default: OpenAIProvider with the config's credential)
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        provider: Optional[AIProvider] = None,
    ):
        self._config = config or ServiceConfig.from_settings(settings)
        self._provider = None

        if self._config.ready:
            self._provider = provider or OpenAIProvider(api_key=self._config.credential)
            logger.info("Generation client initialized - AI generation enabled")
        else:
            logger.warning("No AI credential configured - content generation will use fallback responses")

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def ready(self) -> bool:
        return self._config.ready

    # -------------------------------------------------------------------------
    # PUBLIC OPERATIONS
    # -------------------------------------------------------------------------

    async def generate_website_content(
        self,
        business_type: str,
        description: str = "",
        options: Optional[Mapping[str, Any]] = None,
    ) -> WebsiteContent:
        """Generate headline, description, services, about and CTA copy."""
        return await self._generate(
            ContentKind.WEBSITE_CONTENT, business_type, description, options
        )

    async def generate_seo_content(
        self,
        business_type: str,
        description: str = "",
        target_keywords: Optional[Sequence[str]] = None,
    ) -> SEOContent:
        """Generate title, meta description, H1, keywords and image alt text."""
        options = {"target_keywords": [str(k) for k in (target_keywords or [])]}
        return await self._generate(
            ContentKind.SEO_CONTENT, business_type, description, options
        )

    async def chat_assistant(
        self,
        user_message: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> ChatReply:
        """Answer a website-building question."""
        return await self._generate(ContentKind.CHAT_REPLY, "", user_message, context)

    async def generate_design_suggestions(
        self,
        business_type: str,
        description: str = "",
        preferences: Optional[Mapping[str, Any]] = None,
    ) -> DesignSuggestions:
        """Suggest colors, typography, layout and sections."""
        return await self._generate(
            ContentKind.DESIGN_SUGGESTIONS, business_type, description, preferences
        )

    # -------------------------------------------------------------------------
    # PIPELINE
    # -------------------------------------------------------------------------

    async def _generate(
        self,
        kind: ContentKind,
        business_type: Optional[str],
        description: Optional[str],
        options: Optional[Mapping[str, Any]],
    ) -> ContentResult:
        business_type = business_type or ""
        description = description or ""
        request_id = uuid4().hex[:12]

        if not self._config.ready:
            ai_logger.log_event(
                request_id,
                "fallback_used",
                {"kind": kind.value, "reason": "not_ready"},
                level=logging.DEBUG,
            )
            return get_fallback(kind, business_type, description)

        request = build_provider_request(kind, business_type, description, options)

        ai_logger.log_request(
            request_id=request_id,
            prompt=request.user_instruction,
            provider=self._provider.provider_type.value,
            model=self._provider.model,
            metadata={"kind": kind.value},
        )

        try:
            response = await self._provider.generate(
                prompt=request.user_instruction,
                system_prompt=request.system_instruction,
                temperature=request.temperature,
                max_tokens=request.max_output_length,
            )
        except Exception as e:
            ai_logger.log_error(request_id, str(e), stage="provider", metadata={"kind": kind.value})
            return get_fallback(kind, business_type, description)

        ai_logger.log_response(request_id, response, metadata={"kind": kind.value})

        if not response.success:
            ai_logger.log_error(
                request_id,
                response.error or "Provider returned an unsuccessful response",
                stage="provider",
                metadata={"kind": kind.value},
            )
            return get_fallback(kind, business_type, description)

        try:
            return resolve_reply(kind, response.content, business_type, request_id=request_id)
        except Exception as e:
            ai_logger.log_error(request_id, str(e), stage="parse", metadata={"kind": kind.value})
            return build_partial_result(kind, response.content, business_type)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
generation_client = GenerationClient()
