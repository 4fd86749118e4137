"""
Run the shorts API with uvicorn.

Run with: python -m shortsbox
"""

import uvicorn

from . import config
from .main import configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run(
        "shortsbox.main:create_app",
        factory=True,
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG and not config.is_production(),
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
