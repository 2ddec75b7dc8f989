"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a test implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for the application's providers.

    A provider class with subclasses is a swappable component: its
    subclasses set ``__is_mock__`` and the container picks one of them.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
