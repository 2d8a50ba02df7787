"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from stay_sphere.config import Settings


def main() -> None:
    """Run the HTTP server on the configured port."""
    settings = Settings()
    uvicorn.run("stay_sphere.api.asgi:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
