"""Run the API server: `python -m agent_hub`."""
import uvicorn

from agent_hub.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "agent_hub.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
