"""Run the artifact finder service: ``uvicorn mvnlocal.main:app`` or ``python -m mvnlocal.main``."""

from __future__ import annotations

import uvicorn

from .factory import create_app
from .settings import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
