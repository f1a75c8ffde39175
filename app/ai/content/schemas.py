"""
Content Schemas - Result shapes and request types for content generation.

Every operation of the generation client returns one of the four result
models below, fully populated. The models are strict: a provider reply is
only accepted when each field is present with the right container type
(a string is never coerced into a list, a number never into a string).
Unknown keys in a reply are dropped.

Example WebsiteContent:
    {
        "headline": "מאפייה מקצועי ואמין",
        "description": "...",
        "services": ["...", "..."],
        "about": "...",
        "cta": "צרו קשר עוד היום לקבלת ייעוץ חינם!"
    }
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# CONTENT KINDS
# ---------------------------------------------------------------------------

class ContentKind(str, Enum):
    """The four kinds of content the generation client produces."""
    WEBSITE_CONTENT = "website_content"
    SEO_CONTENT = "seo_content"
    CHAT_REPLY = "chat_reply"
    DESIGN_SUGGESTIONS = "design_suggestions"


# ---------------------------------------------------------------------------
# RESULT MODELS
# ---------------------------------------------------------------------------

class _ContentResult(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class WebsiteContent(_ContentResult):
    """Website copy: headline, business description, services, about, CTA."""
    headline: str
    description: str
    services: List[str]
    about: str
    cta: str


class SEOContent(_ContentResult):
    """SEO metadata for the main page."""
    title: str
    description: str
    h1: str
    keywords: List[str]
    alt: str


class ChatReply(_ContentResult):
    """Assistant reply plus follow-up questions offered to the user."""
    message: str
    suggestions: List[str]


class DesignSuggestions(_ContentResult):
    """
    Design direction for a site.

    colors maps a role (primary, secondary, ...) to a hex code, typography
    maps a role (heading, body, size) to a font description.
    """
    colors: Dict[str, str]
    typography: Dict[str, str]
    layout: List[str]
    sections: List[str]


ContentResult = Union[WebsiteContent, SEOContent, ChatReply, DesignSuggestions]

RESULT_MODELS: Dict[ContentKind, Type[_ContentResult]] = {
    ContentKind.WEBSITE_CONTENT: WebsiteContent,
    ContentKind.SEO_CONTENT: SEOContent,
    ContentKind.CHAT_REPLY: ChatReply,
    ContentKind.DESIGN_SUGGESTIONS: DesignSuggestions,
}


# ---------------------------------------------------------------------------
# PROVIDER REQUEST
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProviderRequest:
    """
    Everything needed for one provider call.

    Attributes:
        system_instruction: Fixed role instruction for the content kind
        user_instruction: Instruction with the caller's inputs interpolated
        max_output_length: Token budget for the reply
        temperature: Sampling temperature in [0, 1]
    """
    system_instruction: str
    user_instruction: str
    max_output_length: int
    temperature: float


# ---------------------------------------------------------------------------
# SERVICE CONFIG
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServiceConfig:
    """
    Provider configuration owned by the generation client.

    ready is computed once from the credential and never changes. A client
    that is not ready never calls the provider.
    """
    credential: Optional[str] = None
    ready: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "ready", bool(self.credential and self.credential.strip()))

    @classmethod
    def from_credential(cls, credential: Optional[str]) -> "ServiceConfig":
        """Build a config with the credential stripped, or None if blank."""
        credential = credential.strip() if credential else None
        return cls(credential=credential or None)

    @classmethod
    def from_settings(cls, settings) -> "ServiceConfig":
        return cls.from_credential(settings.OPENAI_API_KEY)
