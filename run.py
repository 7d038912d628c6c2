#!/usr/bin/env python3
import uvicorn

from foodsupply.config.settings import settings


if __name__ == "__main__":
    uvicorn.run("foodsupply.main:app", host=settings.host, port=settings.port, reload=settings.debug)
