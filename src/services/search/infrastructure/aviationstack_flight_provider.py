from datetime import datetime

import requests
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.search.domain import (
    ExternalFlight,
    ExternalFlightProvider,
    estimate_price,
)
from services.search.infrastructure.aviationstack_models import (
    AviationstackFlight,
    AviationstackResponse,
)
from services.search.infrastructure.mock_flight_provider import MockFlightProvider
from services.shared.domain import IsoDateTime

logger = Logger(child=True)

DEFAULT_BASE_URL = "https://api.aviationstack.com/v1/flights"
DEFAULT_LIMIT = 10
DEFAULT_TIMEOUT_SECONDS = 5


class AviationstackFlightProvider(ExternalFlightProvider):
    """Aviationstack API を使用した ExternalFlightProvider の具象実装

    - API エラー・空データ・通信失敗時、fetch_all と fetch_by_id はモックデータ、
      それ以外は空の結果を返す
    - リクエスト URL にはアクセスキーが含まれるため、URL はログに出力しない
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        fallback: ExternalFlightProvider | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._session = session or requests.Session()
        self._fallback = fallback or MockFlightProvider()
        self._timeout = timeout

    def fetch_all(self) -> list[ExternalFlight]:
        flights = self._fetch()
        if flights is None:
            logger.warning("Falling back to mock flight data")
            return self._fallback.fetch_all()
        return flights

    def fetch_by_number(self, flight_number: str) -> list[ExternalFlight]:
        return self._fetch(flight_iata=flight_number) or []

    def fetch_by_route(self, origin: str, destination: str) -> list[ExternalFlight]:
        return self._fetch(dep_iata=origin, arr_iata=destination) or []

    def fetch_by_id(self, external_id: str) -> ExternalFlight | None:
        """便名で取得し、取得できなければモックの同一ID、それも無ければ先頭のモック"""
        flights = self.fetch_by_number(external_id)
        if flights:
            return flights[0]
        logger.warning(
            "Falling back to mock flight data", extra={"external_id": external_id}
        )
        found = self._fallback.fetch_by_id(external_id)
        if found is not None:
            return found
        mock_flights = self._fallback.fetch_all()
        return mock_flights[0] if mock_flights else None

    def _fetch(self, **filters: str) -> list[ExternalFlight] | None:
        """API を呼び出して変換する（取得できない場合は None）"""
        params: dict = {"access_key": self._api_key, "limit": DEFAULT_LIMIT}
        params.update({k: v for k, v in filters.items() if v and v.strip()})
        log_extra = {k: v for k, v in params.items() if k != "access_key"}

        logger.info("Calling Aviationstack API", extra=log_extra)
        try:
            response = self._session.get(
                self._base_url, params=params, timeout=self._timeout
            )
            response.raise_for_status()
            body = AviationstackResponse.model_validate(response.json())
        except (requests.RequestException, ValueError, ValidationError) as e:
            # 例外メッセージに URL（アクセスキー）が含まれうるため型名のみ残す
            logger.error(
                "Aviationstack API request failed",
                extra={**log_extra, "error": type(e).__name__},
            )
            return None

        if body.error is not None:
            logger.warning(
                "Aviationstack API returned an error",
                extra={
                    **log_extra,
                    "code": body.error.code,
                    "error_message": body.error.message,
                },
            )
            return None
        if not body.data:
            logger.info("Aviationstack API returned no data", extra=log_extra)
            return None

        flights = [to_external_flight(f) for f in body.data]
        logger.info(
            "Fetched flights from Aviationstack API",
            extra={**log_extra, "count": len(flights)},
        )
        return flights


def to_external_flight(source: AviationstackFlight) -> ExternalFlight:
    """Aviationstack のフライトを ExternalFlight に変換する"""
    info = source.flight
    number = (info.number or info.iata) if info else None
    external_id = (info.iata or info.number) if info else None

    origin = source.departure.code if source.departure else None
    destination = source.arrival.code if source.arrival else None

    return ExternalFlight(
        id=external_id or "",
        flight_number=number,
        airline=source.airline.name if source.airline else None,
        origin=origin,
        destination=destination,
        price=estimate_price(origin, destination),
        departure_time=parse_iso(source.departure.scheduled)
        if source.departure
        else None,
        arrival_time=parse_iso(source.arrival.scheduled) if source.arrival else None,
    )


def parse_iso(s: str | None) -> IsoDateTime | None:
    """先頭19文字（YYYY-MM-DDTHH:MM:SS）をローカル日時として解釈する"""
    if not s or not s.strip():
        return None
    try:
        return IsoDateTime(value=datetime.fromisoformat(s[:19]))
    except ValueError:
        return None
