"""
AI Module - Content generation for WebMaster Pro.

Module Structure:
================
- providers/: LLM provider clients (OpenAI)
- content/: generation client, prompts, reply resolution and fallbacks
- monitoring/: structured logging of AI requests and failures

Flow:
=====
1. HTTP layer calls one of the generation client operations
2. Client builds the prompt for the content kind
3. Provider generates a reply (skipped when no API key is configured)
4. Reply is parsed into the kind's result shape, or replaced by fallback content
"""

__version__ = "1.0.0"

from app.ai.content import GenerationClient, generation_client

__all__ = [
    "GenerationClient",
    "generation_client",
]
