"""
AI Logger - Structured logging for content generation.

Each event is written as one JSON document so generation requests can be
traced end to end by request_id:
- ai_request: prompt sent to the provider
- ai_response: provider answer (success or failure, tokens, latency)
- ai_error: an absorbed failure and the stage it happened in
- any other named pipeline event (fallback selection, etc.)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from app.ai.providers.base import AIResponse
from app.core.config import settings

logger = logging.getLogger("webmaster.ai")
logger.setLevel(settings.LOG_LEVEL.upper())

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AILogger:
    """
    Structured logger for AI operations.

    Usage:
        ai_logger.log_request(
            request_id="abc123",
            prompt="Business Type: bakery ...",
            provider="openai",
            model="gpt-4",
            metadata={"kind": "website_content"},
        )
        ai_logger.log_response(request_id="abc123", response=ai_response)
    """

    def __init__(self):
        self._logger = logger

    def log_request(
        self,
        request_id: str,
        prompt: str,
        provider: str,
        model: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a provider request.

        Only a preview of the prompt is written, never the full text.
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "provider": provider,
            "model": model,
            "prompt_length": len(prompt),
            "prompt_preview": prompt[:100] + "..." if len(prompt) > 100 else prompt,
            "timestamp": _now(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.info(f"AI Request: {json.dumps(log_data, ensure_ascii=False, default=str)}")

    def log_response(
        self,
        request_id: str,
        response: AIResponse,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a provider response. Failed responses are logged as warnings."""
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "provider": response.provider.value,
            "model": response.model,
            "success": response.success,
            "latency_ms": round(response.latency_ms, 2),
            "tokens": {
                "prompt": response.usage.prompt_tokens,
                "completion": response.usage.completion_tokens,
                "total": response.usage.total_tokens,
            },
            "response_length": len(response.content),
            "timestamp": _now(),
        }

        if not response.success:
            log_data["error"] = response.error

        if metadata:
            log_data["metadata"] = metadata

        level = logging.INFO if response.success else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data, ensure_ascii=False, default=str)}")

    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an absorbed error in the generation pipeline.

        Args:
            request_id: Request identifier
            error: Error message
            stage: Where the error occurred (provider, parse)
            metadata: Additional context
        """
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "error": error,
            "stage": stage,
            "timestamp": _now(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.error(f"AI Error: {json.dumps(log_data, ensure_ascii=False, default=str)}")

    def log_event(
        self,
        request_id: str,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: int = logging.INFO,
    ) -> None:
        """Log a generic pipeline event (fallback_used, partial_result, ...)."""
        log_data = {
            "event": event_type,
            "request_id": request_id,
            "timestamp": _now(),
        }

        if data:
            log_data.update(data)

        self._logger.log(level, f"AI Event: {json.dumps(log_data, ensure_ascii=False, default=str)}")


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
