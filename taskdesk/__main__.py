"""Run the API with `python -m taskdesk`."""

import uvicorn

from taskdesk.core.config import settings


def main() -> None:
    uvicorn.run("taskdesk.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
