"""
Fallback Catalog - Canned content used when the provider path is unavailable.

These functions are the unconditional safety net of the generation client.
They are used when:
1. No API key is configured (the client is not ready)
2. The provider call fails, times out or is rejected

They are pure and deterministic: the same arguments always produce the same
result, nothing depends on time, randomness or provider state, and empty
strings are interpolated like any other value.
"""

from app.ai.content.schemas import (
    ChatReply,
    ContentKind,
    ContentResult,
    DesignSuggestions,
    SEOContent,
    WebsiteContent,
)


def website_content_fallback(business_type: str, description: str) -> WebsiteContent:
    return WebsiteContent(
        headline=f"{business_type} מקצועי ואמין",
        description=f"אנחנו מתמחים בשירותי {business_type} איכותיים עם ניסיון של שנים בתחום. {description}",
        services=[
            f"שירותי {business_type} מקצועיים",
            "ייעוץ אישי ומותאם",
            "שירות אמין ואיכותי",
            "תמיכה מלאה ללקוחות",
        ],
        about=(
            f"אנחנו צוות מקצועי ומנוסה בתחום {business_type}. "
            "אנו מתחייבים לספק שירות ברמה הגבוהה ביותר לכל לקוח."
        ),
        cta="צרו קשר עוד היום לקבלת ייעוץ חינם!",
    )


def seo_content_fallback(business_type: str, description: str) -> SEOContent:
    """The canned meta text does not use description."""
    return SEOContent(
        title=f"{business_type} מקצועי | שירות איכותי בישראל",
        description=(
            f"שירותי {business_type} מקצועיים ואמינים. "
            "ניסיון רב, שירות איכותי ומחירים הוגנים. צרו קשר לייעוץ חינם!"
        ),
        h1=f"{business_type} מקצועי ואמין בישראל",
        keywords=[business_type, "שירות מקצועי", "ישראל", "איכות", "אמין"],
        alt=f"תמונה של שירותי {business_type} מקצועיים",
    )


def chat_reply_fallback(user_message: str) -> ChatReply:
    """The demo reply does not depend on the user's message."""
    return ChatReply(
        message=(
            "אני כאן לעזור לך לבנות אתר מקצועי! "
            "אמנם זה תגובה דמו (לא OpenAI אמיתי), "
            "אבל אני יכול לעזור עם עצות כלליות על בניית אתרים."
        ),
        suggestions=[
            "איך בוחרים תבנית מתאימה?",
            "מה כולל אתר מקצועי?",
            "איך מקדמים אתר ברשת?",
            "כמה עולה אתר איכותי?",
        ],
    )


def design_suggestions_fallback(business_type: str, description: str) -> DesignSuggestions:
    """The canned palette and layout do not depend on the business."""
    return DesignSuggestions(
        colors={
            "primary": "#2563eb",
            "secondary": "#1e40af",
            "accent": "#3b82f6",
            "background": "#f8fafc",
        },
        typography={
            "heading": "Heebo Bold",
            "body": "Heebo Regular",
            "size": "16px base size",
        },
        layout=[
            "Header עם לוגו ותפריט",
            "Hero section עם כותרת ראשית",
            "Services/Products section",
            "About section",
            "Contact section",
        ],
        sections=[
            "דף בית",
            "אודותינו",
            "השירותים שלנו",
            "יצירת קשר",
            "גלריה",
        ],
    )


def get_fallback(kind: ContentKind, business_type: str, description: str) -> ContentResult:
    """
    Return the canned result for a content kind.

    For chat replies, description carries the user's message.
    """
    if kind == ContentKind.WEBSITE_CONTENT:
        return website_content_fallback(business_type, description)
    if kind == ContentKind.SEO_CONTENT:
        return seo_content_fallback(business_type, description)
    if kind == ContentKind.CHAT_REPLY:
        return chat_reply_fallback(description)
    return design_suggestions_fallback(business_type, description)
