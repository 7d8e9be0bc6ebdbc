import os

from services.search.domain import ExternalFlightProvider
from services.search.infrastructure.aviationstack_flight_provider import (
    DEFAULT_BASE_URL,
    AviationstackFlightProvider,
)
from services.search.infrastructure.mock_flight_provider import MockFlightProvider


def build_external_flight_provider() -> ExternalFlightProvider:
    """環境変数から外部フライトプロバイダを構築する

    EXTERNAL_FLIGHTS_USE_MOCK が true（既定）または API キー未設定ならモックを使用する。
    """
    use_mock = os.getenv("EXTERNAL_FLIGHTS_USE_MOCK", "true").lower() == "true"
    api_key = os.getenv("AVIATIONSTACK_API_KEY", "")
    if use_mock or not api_key:
        return MockFlightProvider()
    return AviationstackFlightProvider(
        api_key=api_key,
        base_url=os.getenv("AVIATIONSTACK_BASE_URL", DEFAULT_BASE_URL),
    )
