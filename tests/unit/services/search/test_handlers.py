import json

from services.search.handlers import external_flights


class TestExternalFlightsHandler:
    """GET /flights/external（モックプロバイダ使用）"""

    def test_list_by_route(self, api_event, lambda_context):
        response = external_flights.lambda_handler(
            api_event(query={"origin": "lhr", "destination": "jfk"}), lambda_context
        )

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert [f["flight_number"] for f in data] == ["BA501"]

    def test_origin_without_destination(self, api_event, lambda_context):
        response = external_flights.lambda_handler(
            api_event(query={"origin": "LHR"}), lambda_context
        )

        assert response["statusCode"] == 400

    def test_unknown_external_flight(self, api_event, lambda_context):
        response = external_flights.lambda_handler(
            api_event(path_parameters={"external_id": "ZZ999"}), lambda_context
        )

        assert response["statusCode"] == 404

    def test_unauthenticated(self, api_event, lambda_context):
        response = external_flights.lambda_handler(api_event(role=None), lambda_context)

        assert response["statusCode"] == 401
