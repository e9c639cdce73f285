"""
FastAPI application lifespan management.

Handles startup and shutdown of all long-lived resources:
  - Logging setup
  - Notion API client
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.logging import setup_logging, get_logger
from app.infrastructure.notion.client import (
    init_notion_client,
    close_notion_client,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Manage application lifecycle.

    Startup:
      1. Configure structured logging
      2. Build the shared Notion client

    Shutdown:
      1. Close the Notion client (release pooled connections)
    """
    # ── Startup ──────────────────────────────────────────────
    setup_logging()
    logger.info("Starting gallery service...")

    init_notion_client()
    logger.info("Notion client initialized")

    yield

    # ── Shutdown ─────────────────────────────────────────────
    logger.info("Shutting down gallery service...")
    await close_notion_client()
    logger.info("Shutdown complete")
