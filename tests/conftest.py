import json
import os
from dataclasses import dataclass

import pytest

# Handler モジュールは import 時に boto3 のクライアントを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-reservation-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test")
os.environ.setdefault("EXTERNAL_FLIGHTS_USE_MOCK", "true")


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを作る Factory fixture

    role=None の場合は Authorizer のコンテキストを含めない。
    """

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        role: str | None = "USER",
        username: str = "alice",
    ) -> dict:
        request_context: dict = {"requestId": "test-request"}
        if role is not None:
            request_context["authorizer"] = {"username": username, "role": role}
        return {
            "httpMethod": "GET" if body is None else "POST",
            "path": "/",
            "headers": {"Content-Type": "application/json"},
            "body": None if body is None else json.dumps(body),
            "pathParameters": path_parameters,
            "queryStringParameters": query,
            "requestContext": request_context,
        }

    return _factory
