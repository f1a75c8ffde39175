"""
Routers module - API endpoint handlers organized by feature.

- ai: AI content generation (website copy, SEO, chat, design)
- templates: website template catalog
"""
