"""
Response Resolver - Turn a provider reply into a content result.

Two outcomes are possible once the provider has answered:

1. The reply is a JSON object matching the kind's result shape: it is
   returned as-is (unknown keys dropped).
2. Anything else (prose, broken JSON, a JSON array, missing fields, a field
   with the wrong type): the whole reply is discarded as structured data and
   a partial result is built from its text instead. Partial results keep
   some of what the model actually said, unlike the fallback catalog, which
   is only used when the provider never answered.

The resolver never raises to its caller.
"""

import json
import logging
import re
from typing import Dict, List, Optional

from pydantic import ValidationError

from app.ai.content.schemas import (
    RESULT_MODELS,
    ChatReply,
    ContentKind,
    ContentResult,
    DesignSuggestions,
    SEOContent,
    WebsiteContent,
)
from app.ai.monitoring import ai_logger

logger = logging.getLogger("webmaster.ai.content.resolver")

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)
_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")

WEBSITE_DESCRIPTION_LIMIT = 200
SEO_DESCRIPTION_LIMIT = 155

# Offered after every live assistant reply that is not structured
CHAT_SUGGESTIONS = [
    "איך אפשר לשפר את העיצוב?",
    "מה חשוב לכלול באתר?",
    "איך מקדמים אתר ב-SEO?",
    "איזה תבנית הכי מתאימה לי?",
]

COLOR_ROLES = ["primary", "secondary", "accent", "background"]
DEFAULT_PALETTE = {
    "primary": "#1f2937",
    "secondary": "#4b5563",
    "accent": "#0ea5e9",
    "background": "#ffffff",
}


class ContentParseError(Exception):
    """Raised when a reply cannot be read as the kind's structured result."""


# ---------------------------------------------------------------------------
# STRUCTURED PARSE
# ---------------------------------------------------------------------------

def _strip_code_fence(text: str) -> str:
    text = text.strip()
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text


def parse_structured_reply(kind: ContentKind, reply_text: str) -> ContentResult:
    """
    Parse a reply into the kind's result model.

    A surrounding markdown code fence is tolerated, nothing else is repaired.

    Raises:
        ContentParseError: reply is not a JSON object or does not match the shape
    """
    try:
        data = json.loads(_strip_code_fence(reply_text))
    except (ValueError, RecursionError, TypeError) as e:
        # ValueError covers JSONDecodeError and oversized integer literals
        raise ContentParseError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ContentParseError(f"Reply JSON is a {type(data).__name__}, expected an object")

    try:
        return RESULT_MODELS[kind].model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ContentParseError(f"Reply does not match {kind.value} shape: {', '.join(fields)}") from e


# ---------------------------------------------------------------------------
# PARTIAL RESULTS
# ---------------------------------------------------------------------------

def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..."


def _partial_website_content(reply_text: str, business_type: str) -> WebsiteContent:
    return WebsiteContent(
        headline=f"{business_type} מקצועי",
        description=_truncate(reply_text, WEBSITE_DESCRIPTION_LIMIT),
        services=["שירות מקצועי", "ייעוץ אישי", "תמיכה מלאה"],
        about="אנחנו צוות מקצועי ומנוסה",
        cta="צרו קשר עוד היום!",
    )


def _partial_seo_content(reply_text: str, business_type: str) -> SEOContent:
    return SEOContent(
        title=f"{business_type} | מידע מקצועי",
        description=_truncate(reply_text, SEO_DESCRIPTION_LIMIT),
        h1=business_type,
        keywords=[business_type, "שירות מקצועי", "ייעוץ"],
        alt=f"תמונה של {business_type}",
    )


def _partial_chat_reply(reply_text: str) -> ChatReply:
    message = reply_text.strip() or "מצטער, לא הצלחתי לנסח תשובה. אפשר לנסות לשאול שוב?"
    return ChatReply(message=message, suggestions=list(CHAT_SUGGESTIONS))


def _extract_colors(reply_text: str) -> Dict[str, str]:
    found: List[str] = []
    for code in _HEX_COLOR.findall(reply_text):
        code = code.lower()
        if code not in found:
            found.append(code)
    colors = dict(DEFAULT_PALETTE)
    colors.update(zip(COLOR_ROLES, found))
    return colors


def _partial_design_suggestions(reply_text: str) -> DesignSuggestions:
    return DesignSuggestions(
        colors=_extract_colors(reply_text),
        typography={
            "heading": "Assistant Bold",
            "body": "Assistant Regular",
            "size": "16px base size",
        },
        layout=["Header", "Hero section", "Content section", "Contact section"],
        sections=["דף בית", "אודותינו", "יצירת קשר"],
    )


def build_partial_result(
    kind: ContentKind,
    reply_text: str,
    business_type: str,
) -> ContentResult:
    """Build a best-effort result from an unstructured reply."""
    reply_text = reply_text or ""
    if kind == ContentKind.WEBSITE_CONTENT:
        return _partial_website_content(reply_text, business_type)
    if kind == ContentKind.SEO_CONTENT:
        return _partial_seo_content(reply_text, business_type)
    if kind == ContentKind.CHAT_REPLY:
        return _partial_chat_reply(reply_text)
    return _partial_design_suggestions(reply_text)


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------

def resolve_reply(
    kind: ContentKind,
    reply_text: str,
    business_type: str,
    request_id: Optional[str] = None,
) -> ContentResult:
    """
    Resolve a provider reply into a result of the right kind.

    Args:
        kind: Content kind requested
        reply_text: Raw text returned by the provider
        business_type: Used to fill partial results
        request_id: Correlation id for diagnostics

    Returns:
        The parsed result, or a partial result if parsing failed
    """
    reply_text = reply_text or ""
    try:
        return parse_structured_reply(kind, reply_text)
    except ContentParseError as e:
        metadata = {"kind": kind.value, "reply_length": len(reply_text)}
        if kind == ContentKind.CHAT_REPLY:
            # Plain prose is the usual chat answer
            ai_logger.log_event(
                request_id=request_id or "-",
                event_type="chat_reply_unstructured",
                data=metadata,
            )
        else:
            ai_logger.log_error(
                request_id=request_id or "-",
                error=str(e),
                stage="parse",
                metadata=metadata,
            )
        logger.debug(f"Unparsable reply: {reply_text[:500]}")
        return build_partial_result(kind, reply_text, business_type)
