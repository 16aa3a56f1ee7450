"""Run the API server: `python -m app` from the backend directory."""

import uvicorn

from refigma.config import API_HOST, API_PORT


def main() -> None:
    uvicorn.run("app.main:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
