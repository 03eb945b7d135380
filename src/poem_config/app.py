from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the Settings an embedding application or the CLI runs with.
    Passing explicit Settings keeps tests independent of the process
    environment.
    """

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults and set up logging."""
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
