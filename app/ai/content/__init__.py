"""
Content Module - AI-generated website copy, SEO metadata, chat and design.

Usage:
    from app.ai.content import generation_client

    seo = await generation_client.generate_seo_content("מסעדה", "...", ["פסטה"])
"""

from app.ai.content.client import GenerationClient, generation_client
from app.ai.content.schemas import (
    ChatReply,
    ContentKind,
    ContentResult,
    DesignSuggestions,
    ProviderRequest,
    SEOContent,
    ServiceConfig,
    WebsiteContent,
)

__all__ = [
    "GenerationClient",
    "generation_client",
    "ChatReply",
    "ContentKind",
    "ContentResult",
    "DesignSuggestions",
    "ProviderRequest",
    "SEOContent",
    "ServiceConfig",
    "WebsiteContent",
]
