from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class AirlineReservationStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        aviationstack_api_key = self.node.try_get_context("aviationstack_api_key")
        external_flights_env = {"EXTERNAL_FLIGHTS_USE_MOCK": "true"}
        if aviationstack_api_key:
            external_flights_env = {
                "EXTERNAL_FLIGHTS_USE_MOCK": "false",
                "AVIATIONSTACK_API_KEY": aviationstack_api_key,
            }

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            external_flights_env=external_flights_env,
            payment_success_rate=str(
                self.node.try_get_context("payment_success_rate") or "0.95"
            ),
        )

        jwt_secret = secretsmanager.Secret(
            self,
            "JwtSigningSecret",
            secret_name="/airline-reservation/jwt-signing-key",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                exclude_punctuation=True,
                password_length=48,
            ),
        )

        api = Api(
            self,
            "Api",
            functions=fns,
            common_layer=layers.common_layer,
            jwt_secret=jwt_secret,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
