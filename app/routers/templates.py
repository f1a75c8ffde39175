"""
Templates Router - Browse the website template catalog.
"""

from typing import Optional

from fastapi import APIRouter, Query

from app.services.template_catalog import TEMPLATE_CATEGORIES, filter_templates


router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("")
def list_templates(
    category: Optional[str] = None,
    limit: int = Query(default=10, ge=0, le=100),
):
    """
    List templates, optionally filtered by category.

    total counts all matches in the category, data holds at most `limit`.
    """
    matches = filter_templates(category)
    return {
        "success": True,
        "data": matches[:limit],
        "total": len(matches),
        "categories": TEMPLATE_CATEGORIES,
    }
