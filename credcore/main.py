"""
Process entry point.

Run with ``credcore`` (console script) or ``uvicorn credcore.main:app``.
"""

import uvicorn

from credcore.config import get_settings
from credcore.factory import create_app

settings = get_settings()
app = create_app(settings)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
