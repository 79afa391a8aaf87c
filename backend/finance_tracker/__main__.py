"""
Run the API server: `python -m finance_tracker`.
"""

import uvicorn

from finance_tracker.config import settings


def main():
    uvicorn.run("finance_tracker.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
