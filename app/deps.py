"""
FastAPI dependencies shared by the routers.

Routes receive the generation client through Depends() so tests can
swap it with app.dependency_overrides.
"""

from app.ai.content import GenerationClient, generation_client


def get_generation_client() -> GenerationClient:
    """Return the process-wide generation client."""
    return generation_client
