#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for DocMorph formatting.

This module provides the REST API for the formatting core:
- Template listing, creation and deletion
- Live preview rendering (tree + HTML)
- Export to plain text, Markdown and DOCX
- Health monitoring

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

    # Or run directly
    python -m api.main

API Documentation:
    - OpenAPI docs: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc

Configuration:
    Environment variables (prefix DOCMORPH_), see config/settings.py:
    - DOCMORPH_CUSTOM_TEMPLATES_FILE: where user templates are stored
    - DOCMORPH_DEFAULT_TEMPLATE_ID: fallback template (default: tpl-ieee)
    - DOCMORPH_RATE_LIMIT / DOCMORPH_EXPORT_RATE_LIMIT: API rate limits
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_config import get_logger
from config.settings import settings
from docmorph import __version__

from .formatting_routes import router as formatting_router
from .limiter import limiter

logger = get_logger(__name__)

app = FastAPI(
    title=settings.api_title,
    description="Template-driven document preview and export",
    version=__version__,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(formatting_router)


@app.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
    }


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    logger.info("Starting DocMorph API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
