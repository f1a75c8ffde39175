"""
Content Prompts - Prompt templates for website content generation.

Each content kind has:
- a fixed system prompt (the model's role), never built from user input
- a user prompt template the caller's inputs are interpolated into
- fixed generation parameters (token budget and temperature)

SEO gets the lowest temperature, chat the highest.

Usage:
======
```python
from app.ai.content.prompts import build_provider_request

request = build_provider_request(
    ContentKind.SEO_CONTENT,
    business_type="מסעדה",
    description="מסעדה איטלקית בתל אביב",
    options={"target_keywords": ["פסטה", "פיצה"]},
)
response = await provider.generate(
    prompt=request.user_instruction,
    system_prompt=request.system_instruction,
    temperature=request.temperature,
    max_tokens=request.max_output_length,
)
```
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from app.ai.content.schemas import ContentKind, ProviderRequest


# ---------------------------------------------------------------------------
# GENERATION PARAMETERS (max_output_length, temperature)
# ---------------------------------------------------------------------------

GENERATION_PARAMETERS: Dict[ContentKind, Tuple[int, float]] = {
    ContentKind.WEBSITE_CONTENT: (1500, 0.7),
    ContentKind.SEO_CONTENT: (800, 0.5),
    ContentKind.CHAT_REPLY: (500, 0.8),
    ContentKind.DESIGN_SUGGESTIONS: (1000, 0.7),
}


# ---------------------------------------------------------------------------
# SYSTEM PROMPTS
# ---------------------------------------------------------------------------

WEBSITE_SYSTEM_PROMPT = (
    "You are a professional Hebrew copywriter creating website content for Israeli businesses. "
    "Always respond in Hebrew with professional, engaging content."
)

SEO_SYSTEM_PROMPT = (
    "You are an expert Hebrew SEO specialist. "
    "Create compelling meta content that ranks well on Israeli Google searches."
)

CHAT_SYSTEM_PROMPT = """You are WebMaster Pro AI Assistant - a helpful website building expert.
You help users create professional websites in Hebrew.

Your capabilities:
- Website design advice
- Content suggestions
- SEO optimization tips
- Business growth strategies
- Technical support

Always respond in Hebrew, be helpful and professional.
Keep responses concise but informative."""

DESIGN_SYSTEM_PROMPT = (
    "You are a professional web designer specializing in modern, "
    "conversion-optimized websites for Israeli businesses."
)

SYSTEM_PROMPTS: Dict[ContentKind, str] = {
    ContentKind.WEBSITE_CONTENT: WEBSITE_SYSTEM_PROMPT,
    ContentKind.SEO_CONTENT: SEO_SYSTEM_PROMPT,
    ContentKind.CHAT_REPLY: CHAT_SYSTEM_PROMPT,
    ContentKind.DESIGN_SUGGESTIONS: DESIGN_SYSTEM_PROMPT,
}


# ---------------------------------------------------------------------------
# USER PROMPT TEMPLATES
# ---------------------------------------------------------------------------

WEBSITE_CONTENT_PROMPT = """You are a professional web content writer specializing in Hebrew content for Israeli businesses.

Business Type: {business_type}
Description: {description}
{extra_section}
Create professional website content in Hebrew including:
1. Main headline (כותרת ראשית)
2. Business description (תיאור העסק)
3. Services/Products section (שירותים/מוצרים)
4. About us section (אודותינו)
5. Contact call-to-action (קריאה לפעולה)

Make it engaging, professional, and optimized for Israeli customers.
Use modern Hebrew business language.
Keep each section concise but impactful.

Respond with a single JSON object only, no markdown, with these keys:
{{"headline": string, "description": string, "services": [string], "about": string, "cta": string}}"""

SEO_CONTENT_PROMPT = """Create SEO-optimized meta content in Hebrew for:
Business: {business_type}
Description: {description}
Keywords: {keywords}

Generate:
1. Title tag (50-60 characters)
2. Meta description (150-160 characters)
3. H1 headline
4. 5 relevant keywords in Hebrew
5. Alt text for main image

Optimize for Israeli search behavior and Hebrew SEO best practices.

Respond with a single JSON object only, no markdown, with these keys:
{{"title": string, "description": string, "h1": string, "keywords": [string], "alt": string}}"""

CHAT_PROMPT = """{context_section}{user_message}"""

DESIGN_SUGGESTIONS_PROMPT = """Suggest professional website design elements for a {business_type} business.
Description: {description}
{extra_section}
Include:
1. Color scheme (3-4 colors with hex codes)
2. Typography suggestions
3. Layout recommendations
4. Key sections to include

Make it modern, professional and suitable for Israeli market.

Respond with a single JSON object only, no markdown, with these keys:
{{"colors": {{role: hex code}}, "typography": {{role: font}}, "layout": [string], "sections": [string]}}"""


# ---------------------------------------------------------------------------
# BUILDERS
# ---------------------------------------------------------------------------

def _format_pairs(title: str, pairs: Optional[Mapping[str, Any]]) -> str:
    """Render a mapping as an indented key/value block, or nothing if empty."""
    if not pairs:
        return ""
    lines = "\n".join(f"  - {key}: {value}" for key, value in pairs.items())
    return f"{title}:\n{lines}\n"


def build_user_prompt(
    kind: ContentKind,
    business_type: str,
    description: str,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Interpolate the caller's inputs into the kind's user prompt.

    options carries the kind-specific extras:
    - website_content: free-form requirements (any mapping)
    - seo_content: {"target_keywords": [...]}
    - chat_reply: description is the user's message, options is the context
    - design_suggestions: visual preferences (any mapping)
    """
    options = options or {}

    if kind == ContentKind.WEBSITE_CONTENT:
        return WEBSITE_CONTENT_PROMPT.format(
            business_type=business_type,
            description=description,
            extra_section=_format_pairs("Additional requirements", options),
        )

    if kind == ContentKind.SEO_CONTENT:
        keywords = options.get("target_keywords") or []
        return SEO_CONTENT_PROMPT.format(
            business_type=business_type,
            description=description,
            keywords=", ".join(keywords),
        )

    if kind == ContentKind.CHAT_REPLY:
        context_section = _format_pairs("Context", options)
        if context_section:
            context_section += "\n"
        return CHAT_PROMPT.format(context_section=context_section, user_message=description)

    return DESIGN_SUGGESTIONS_PROMPT.format(
        business_type=business_type,
        description=description,
        extra_section=_format_pairs("Client preferences", options),
    )


def build_provider_request(
    kind: ContentKind,
    business_type: str,
    description: str,
    options: Optional[Mapping[str, Any]] = None,
) -> ProviderRequest:
    """
    Build the full provider request for a content kind.

    Pure and deterministic: identical inputs give an identical request.
    """
    max_output_length, temperature = GENERATION_PARAMETERS[kind]
    return ProviderRequest(
        system_instruction=SYSTEM_PROMPTS[kind],
        user_instruction=build_user_prompt(kind, business_type, description, options),
        max_output_length=max_output_length,
        temperature=temperature,
    )
