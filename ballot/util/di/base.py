"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Optional, Type

from dishka import Provider

# Components whose provider can be swapped for an in-memory double
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all providers listed in ``PROVIDERS``.

    A provider is either concrete (used as-is) or the base of a mockable
    component: it names the component in ``__mock_component__`` and has one
    production and one mock subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Optional[Component]] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this class is a component base with implementations."""
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> Optional[Type["ProviderBase"]]:
        """Find the production or mock subclass of a component base."""
        return next(
            (c for c in cls.__subclasses__() if c.__is_mock__ == use_mock), None
        )
