"""LaunchGuard - Main application entry point."""

import uvicorn

from launchguard.api.app import create_app
from launchguard.config import get_settings

# Create the app instance
app = create_app()


def main() -> None:
    """Run the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "launchguard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
