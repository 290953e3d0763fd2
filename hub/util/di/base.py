"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests can swap: the two upstream platforms and cookie storage
Component = Literal["steam", "epic", "cookies"]


class ProviderBase(Provider):
    """Base for all DI providers with unified metadata.

    Attributes:
        __mock_component__: Component name for swappable providers, None
            for concrete ones
        __is_mock__: Whether this is the test implementation (fake
            upstream or in-memory stores)
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
