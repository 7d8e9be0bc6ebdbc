from pydantic import BaseModel, ConfigDict


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AviationstackFlightInfo(_WireModel):
    number: str | None = None
    iata: str | None = None
    icao: str | None = None


class AviationstackAirline(_WireModel):
    name: str | None = None
    iata: str | None = None
    icao: str | None = None


class AviationstackAirport(_WireModel):
    airport_name: str | None = None
    iata: str | None = None
    icao: str | None = None
    city: str | None = None


class AviationstackEndpoint(_WireModel):
    """出発地・到着地の情報

    airport は通常は空港名の文字列だが、オブジェクトで返る場合にも対応する。
    """

    airport: str | AviationstackAirport | None = None
    timezone: str | None = None
    iata: str | None = None
    icao: str | None = None
    terminal: str | None = None
    gate: str | None = None
    scheduled: str | None = None
    estimated: str | None = None
    actual: str | None = None

    @property
    def code(self) -> str | None:
        if self.iata:
            return self.iata
        if isinstance(self.airport, AviationstackAirport):
            return self.airport.iata
        return None


class AviationstackFlight(_WireModel):
    flight_date: str | None = None
    flight_status: str | None = None
    flight: AviationstackFlightInfo | None = None
    airline: AviationstackAirline | None = None
    departure: AviationstackEndpoint | None = None
    arrival: AviationstackEndpoint | None = None


class AviationstackError(_WireModel):
    code: str | None = None
    message: str | None = None


class AviationstackResponse(_WireModel):
    """GET /v1/flights のレスポンス"""

    data: list[AviationstackFlight] | None = None
    error: AviationstackError | None = None
