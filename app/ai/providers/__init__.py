"""
AI Providers Module - LLM provider clients.

Each provider implements the same interface, so the content generation
client only depends on AIProvider:
    response = await provider.generate(prompt, system_prompt=..., **kwargs)
"""

from app.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from app.ai.providers.openai_provider import OpenAIProvider

__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "OpenAIProvider",
]
