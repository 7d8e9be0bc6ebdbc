import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct

    書き込みを行う関数には読み書き権限、参照のみの関数には読み取り権限を付与する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        external_flights_env: dict[str, str] | None = None,
        payment_success_rate: str = "0.95",
    ) -> None:
        super().__init__(scope, id)
        self._table = table
        self._common_layer = common_layer
        external_env = external_flights_env or {"EXTERNAL_FLIGHTS_USE_MOCK": "true"}

        # Inventory
        self.create_airport = self._writer(
            "CreateAirportLambda", "flight.handlers.create_airport", "flight-service"
        )
        self.get_airports = self._reader(
            "GetAirportsLambda", "flight.handlers.get_airports", "flight-service"
        )
        self.update_airport = self._writer(
            "UpdateAirportLambda", "flight.handlers.update_airport", "flight-service"
        )
        self.delete_airport = self._writer(
            "DeleteAirportLambda", "flight.handlers.delete_airport", "flight-service"
        )
        self.create_flight = self._writer(
            "CreateFlightLambda", "flight.handlers.create_flight", "flight-service"
        )
        self.get_flights = self._reader(
            "GetFlightsLambda", "flight.handlers.get_flights", "flight-service"
        )
        self.update_flight_status = self._writer(
            "UpdateFlightStatusLambda",
            "flight.handlers.update_flight_status",
            "flight-service",
        )
        self.delete_flight = self._writer(
            "DeleteFlightLambda", "flight.handlers.delete_flight", "flight-service"
        )
        self.get_seats = self._reader(
            "GetSeatsLambda", "flight.handlers.get_seats", "flight-service"
        )
        self.import_external = self._writer(
            "ImportExternalFlightLambda",
            "flight.handlers.import_external",
            "flight-service",
            external_env,
        )

        # Passenger
        self.register_passenger = self._writer(
            "RegisterPassengerLambda",
            "passenger.handlers.register",
            "passenger-service",
        )
        self.get_passengers = self._reader(
            "GetPassengersLambda",
            "passenger.handlers.get_passengers",
            "passenger-service",
        )
        self.update_passenger = self._writer(
            "UpdatePassengerLambda", "passenger.handlers.update", "passenger-service"
        )
        self.delete_passenger = self._writer(
            "DeletePassengerLambda", "passenger.handlers.delete", "passenger-service"
        )

        # Booking
        self.create_booking = self._writer(
            "CreateBookingLambda", "booking.handlers.create", "booking-service"
        )
        self.confirm_booking = self._writer(
            "ConfirmBookingLambda", "booking.handlers.confirm", "booking-service"
        )
        self.cancel_booking = self._writer(
            "CancelBookingLambda", "booking.handlers.cancel", "booking-service"
        )
        self.get_bookings = self._reader(
            "GetBookingsLambda", "booking.handlers.get_bookings", "booking-service"
        )

        # Payment
        self.process_payment = self._writer(
            "ProcessPaymentLambda",
            "payment.handlers.process",
            "payment-service",
            {"PAYMENT_SUCCESS_RATE": payment_success_rate},
        )
        self.get_payments = self._reader(
            "GetPaymentsLambda", "payment.handlers.get_payments", "payment-service"
        )

        # Search
        self.search_unified = self._reader(
            "SearchUnifiedLambda",
            "search.handlers.search",
            "search-service",
            external_env,
        )
        self.external_flights = self._reader(
            "ExternalFlightsLambda",
            "search.handlers.external_flights",
            "search-service",
            external_env,
        )

    def _writer(
        self,
        id: str,
        module: str,
        service_name: str,
        extra_env: dict[str, str] | None = None,
    ) -> _lambda.Function:
        fn = self._create_function(id, module, service_name, extra_env)
        self._table.grant_read_write_data(fn)
        return fn

    def _reader(
        self,
        id: str,
        module: str,
        service_name: str,
        extra_env: dict[str, str] | None = None,
    ) -> _lambda.Function:
        fn = self._create_function(id, module, service_name, extra_env)
        self._table.grant_read_data(fn)
        return fn

    def _create_function(
        self,
        id: str,
        module: str,
        service_name: str,
        extra_env: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=f"services.{module}.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=Duration.seconds(15),
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(extra_env or {}),
            },
        )
