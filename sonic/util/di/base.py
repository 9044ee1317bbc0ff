"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class without subclasses is concrete and used as-is. A
    provider class with subclasses names a swappable component: it has one
    production subclass and one mock subclass, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Pick the production or mock implementation of this provider.

        Raises:
            ValueError: If the component has no such implementation
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
