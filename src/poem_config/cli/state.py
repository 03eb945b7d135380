"""CLI state container."""

from typing import Callable

from ..config.settings import Settings
from ..loading.loader import ConfigLoader

LoaderFactory = Callable[[Settings], ConfigLoader]


class CLIState:
    """Application state shared by CLI commands.

    Holds Settings and the factory used to build a ConfigLoader, so tests
    can swap in a mocked loader.
    """

    def __init__(
        self,
        settings: Settings,
        loader_factory: LoaderFactory = ConfigLoader,
    ):
        self.settings = settings
        self._loader_factory = loader_factory

    def create_loader(self) -> ConfigLoader:
        return self._loader_factory(self.settings)
