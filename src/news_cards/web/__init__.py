# ABOUTME: Web layer for the news cards service.
# ABOUTME: FastAPI app factory, dependencies and routes.
