"""Provider base class and implementation selection.

A provider class without subclasses is concrete and used as is. A provider
class with subclasses is the base of a swappable component: it names the
component in ``__mock_component__``, and each subclass marks itself as the
production or the test implementation through ``__is_mock__``.
"""

from collections.abc import Iterable
from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["events", "persistence"]


class ProviderBase(Provider):
    """Base of every Remark provider."""

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Pick the implementation of a provider.

    Args:
        base: Concrete provider or component base
        use_mock: Whether a component should use its test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def swappable_components(providers: Iterable[type[ProviderBase]]) -> set[str]:
    """Names of the components among ``providers`` that have implementations."""
    return {
        provider.__mock_component__
        for provider in providers
        if provider.__mock_component__ and provider.__subclasses__()
    }
