#!/usr/bin/env python3
"""
Startup script for the Task Manager API
This script starts the FastAPI server with the configured host, port and reload mode
"""

import logging

import uvicorn

from app.config.settings import settings

logger = logging.getLogger(__name__)

def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Starting Task Manager API server on %s:%s (reload=%s)",
                settings.HOST, settings.PORT, settings.RELOAD)

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
