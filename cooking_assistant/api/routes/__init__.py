"""API routes package"""

from cooking_assistant.api.routes import auth, cooking, recipes

__all__ = [
    "auth",
    "cooking",
    "recipes",
]
