from aws_cdk import Duration
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct

    全ルートに JWT を検証する TOKEN オーソライザーを設定する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: Functions,
        common_layer: _lambda.LayerVersion,
        jwt_secret: secretsmanager.ISecret,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "ReservationRestApi",
            rest_api_name="Airline Reservation API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        authorizer_fn = _lambda.Function(
            self,
            "JwtAuthorizerFn",
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler="authorizer.handler.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "JWT_SECRET_ARN": jwt_secret.secret_arn,
                "POWERTOOLS_SERVICE_NAME": "authorizer",
            },
        )
        jwt_secret.grant_read(authorizer_fn)

        self.authorizer = apigw.TokenAuthorizer(
            self,
            "JwtAuthorizer",
            handler=authorizer_fn,
            results_cache_ttl=Duration.seconds(300),
        )

        root = self.rest_api.root
        fns = functions

        # /airports
        airports = root.add_resource("airports")
        self._route(airports, "POST", fns.create_airport)
        self._route(airports, "GET", fns.get_airports)
        airport = airports.add_resource("{code}")
        self._route(airport, "GET", fns.get_airports)
        self._route(airport, "PUT", fns.update_airport)
        self._route(airport, "DELETE", fns.delete_airport)

        # /flights
        flights = root.add_resource("flights")
        self._route(flights, "POST", fns.create_flight)
        self._route(flights, "GET", fns.get_flights)
        self._route(flights.add_resource("search"), "POST", fns.get_flights)
        self._route(
            flights.add_resource("search-unified"), "POST", fns.search_unified
        )
        self._route(
            flights.add_resource("import-from-external"), "POST", fns.import_external
        )
        number = flights.add_resource("number").add_resource("{flight_number}")
        self._route(number, "GET", fns.get_flights)

        flight = flights.add_resource("{flight_id}")
        self._route(flight, "GET", fns.get_flights)
        self._route(flight, "DELETE", fns.delete_flight)
        self._route(flight.add_resource("status"), "PATCH", fns.update_flight_status)
        self._route(flight.add_resource("seats"), "GET", fns.get_seats)

        external = flights.add_resource("external")
        self._route(external, "GET", fns.external_flights)
        self._route(
            external.add_resource("number").add_resource("{flight_number}"),
            "GET",
            fns.external_flights,
        )
        self._route(
            external.add_resource("{external_id}"), "GET", fns.external_flights
        )

        # /seats
        seats = root.add_resource("seats")
        self._route(seats.add_resource("{seat_id}"), "GET", fns.get_seats)

        # /passengers
        passengers = root.add_resource("passengers")
        self._route(passengers, "POST", fns.register_passenger)
        self._route(passengers, "GET", fns.get_passengers)
        passenger = passengers.add_resource("{passenger_id}")
        self._route(passenger, "GET", fns.get_passengers)
        self._route(passenger, "PUT", fns.update_passenger)
        self._route(passenger, "DELETE", fns.delete_passenger)
        self._route(passenger.add_resource("bookings"), "GET", fns.get_bookings)
        self._route(
            passengers.add_resource("email").add_resource("{email}"),
            "GET",
            fns.get_passengers,
        )

        # /bookings
        bookings = root.add_resource("bookings")
        self._route(bookings, "POST", fns.create_booking)
        self._route(bookings, "GET", fns.get_bookings)
        booking = bookings.add_resource("{booking_id}")
        self._route(booking, "GET", fns.get_bookings)
        self._route(booking.add_resource("confirm"), "PUT", fns.confirm_booking)
        self._route(booking.add_resource("cancel"), "PUT", fns.cancel_booking)
        self._route(
            bookings.add_resource("reference").add_resource("{booking_reference}"),
            "GET",
            fns.get_bookings,
        )

        # /payments
        payments = root.add_resource("payments")
        self._route(payments, "POST", fns.process_payment)
        self._route(payments, "GET", fns.get_payments)
        self._route(payments.add_resource("{payment_id}"), "GET", fns.get_payments)
        self._route(
            payments.add_resource("transaction").add_resource("{transaction_id}"),
            "GET",
            fns.get_payments,
        )
        self._route(
            payments.add_resource("booking").add_resource("{booking_id}"),
            "GET",
            fns.get_payments,
        )

    def _route(
        self, resource: apigw.IResource, method: str, fn: _lambda.Function
    ) -> None:
        resource.add_method(
            method, apigw.LambdaIntegration(fn), authorizer=self.authorizer
        )
