"""Run the API with uvicorn: ``python -m content_flagging``."""
from __future__ import annotations

import uvicorn

from content_flagging.deps.settings import settings


def main() -> None:
    uvicorn.run("content_flagging.app:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
