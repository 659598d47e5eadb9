#!/usr/bin/env python3
"""
Server entry point: runs matchmaker.main:app under uvicorn.

Host and port come from HOST / PORT (see core/config.py).
"""
import sys

import uvicorn

from matchmaker.core.config import settings


def serve() -> int:
    try:
        uvicorn.run(
            "matchmaker.main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=False,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=True,
        )
    except KeyboardInterrupt:
        print("\n[matchmaker] Shutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(serve())
