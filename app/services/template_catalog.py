"""
Template Catalog - Static list of website templates offered to users.

Templates are fixed data for now. Filtering matches the category name
case-insensitively, then the result is capped at `limit` entries.
"""

from typing import Any, Dict, List, Optional


TEMPLATE_CATEGORIES = ["עסקי", "רפואי", "מזון", "מסחר", "חינוך", "ספורט"]

TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "עסק מקומי",
        "description": "תבנית מושלמת לעסקים מקומיים",
        "category": "עסקי",
        "price": 2500,
        "image": "/templates/local-business.jpg",
        "features": ["רספונסיבי", "SEO מותאם", "טפסי יצירת קשר"],
        "demo_url": "https://demo.webmaster-pro.co.il/local-business",
    },
    {
        "id": 2,
        "name": "רופא/קליניקה",
        "description": "עיצוב מקצועי לרופאים ובעלי מקצוע",
        "category": "רפואי",
        "price": 3000,
        "image": "/templates/medical.jpg",
        "features": ["הזמנת תורים", "גלריית שירותים", "מידע רפואי"],
        "demo_url": "https://demo.webmaster-pro.co.il/medical",
    },
    {
        "id": 3,
        "name": "מסעדה",
        "description": "תבנית אלגנטית למסעדות ובתי קפה",
        "category": "מזון",
        "price": 2800,
        "image": "/templates/restaurant.jpg",
        "features": ["תפריט דיגיטלי", "הזמנת שולחן", "גלריית מנות"],
        "demo_url": "https://demo.webmaster-pro.co.il/restaurant",
    },
    {
        "id": 4,
        "name": "חנות אונליין",
        "description": "חנות מקוונת מלאה עם עגלת קניות",
        "category": "מסחר",
        "price": 4000,
        "image": "/templates/ecommerce.jpg",
        "features": ["עגלת קניות", "תשלומים מאובטחים", "ניהול מלאי"],
        "demo_url": "https://demo.webmaster-pro.co.il/ecommerce",
    },
]


def filter_templates(category: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return templates in a category, or all templates when category is empty."""
    if not category:
        return list(TEMPLATES)
    wanted = category.lower()
    return [t for t in TEMPLATES if t["category"].lower() == wanted]
