import os

import boto3
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from jose import JWTError, jwt

logger = Logger()

ALGORITHM = "HS256"
DEFAULT_ROLE = "USER"

_secret_cache: str | None = None


def _get_secret() -> str:
    global _secret_cache
    if _secret_cache is None:
        client = boto3.client("secretsmanager")
        response = client.get_secret_value(SecretId=os.environ["JWT_SECRET_ARN"])
        _secret_cache = response["SecretString"]
    return _secret_cache


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _api_arn(method_arn: str) -> str:
    """メソッド ARN からステージ全体（全メソッド・全リソース）の ARN を作る

    認可結果はキャッシュされるため、呼び出したメソッドに限定しない。
    """
    arn_parts = method_arn.split(":")
    region = arn_parts[3]
    account_id = arn_parts[4]
    api_gw_arn = arn_parts[5]
    rest_api_id = api_gw_arn.split("/")[0]
    stage = api_gw_arn.split("/")[1]
    return f"arn:aws:execute-api:{region}:{account_id}:{rest_api_id}/{stage}/*/*"


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """API Gateway TOKEN オーソライザー

    Authorization: Bearer <JWT(HS256)> を検証し、username / role を
    後続の Lambda に authorizer コンテキストとして渡す。
    """
    token = _bearer_token(event.get("authorizationToken"))
    if token is None:
        logger.info("Missing bearer token")
        raise Exception("Unauthorized")

    try:
        claims = jwt.decode(token, _get_secret(), algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info("Token verification failed", extra={"error": str(e)})
        raise Exception("Unauthorized") from e

    username = claims.get("sub")
    if not username:
        logger.info("Token has no subject")
        raise Exception("Unauthorized")
    role = str(claims.get("role", DEFAULT_ROLE)).upper()

    return {
        "principalId": username,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow",
                    "Resource": _api_arn(event["methodArn"]),
                }
            ],
        },
        "context": {"username": username, "role": role},
    }
