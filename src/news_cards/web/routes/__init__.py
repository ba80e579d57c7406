# ABOUTME: Routes module initialization.
# ABOUTME: Exports all route modules for FastAPI app.

from news_cards.web.routes import api

__all__ = ["api"]
