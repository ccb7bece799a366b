from dishka import AsyncContainer, Provider, Scope, from_context, make_async_container

from brainapi.config import Config
from brainapi.domain.dataset.util.di.provider import DatasetProvider
from brainapi.infrastructure.http.di import HttpProvider


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None, *overrides: Provider) -> AsyncContainer:
    """Build the application container.

    Providers passed in ``overrides`` are registered last, so they replace any
    earlier registration of the same type (tests use this to swap the fetcher).
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        HttpProvider(),
        DatasetProvider(),
        *overrides,
        context={Config: config},
    )
