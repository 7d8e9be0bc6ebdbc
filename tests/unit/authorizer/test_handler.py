import time

import pytest
from jose import jwt

from authorizer import handler

SECRET = "test-signing-key"
METHOD_ARN = (
    "arn:aws:execute-api:ap-northeast-1:123456789012:abc123/prod/GET/bookings/b-1"
)


@pytest.fixture(autouse=True)
def signing_key(monkeypatch):
    monkeypatch.setattr(handler, "_get_secret", lambda: SECRET)


@pytest.fixture
def token_factory():
    """署名済み JWT を作る Factory fixture"""

    def _factory(key: str = SECRET, **claims) -> str:
        payload = {"sub": "alice", "exp": int(time.time()) + 3600}
        payload.update(claims)
        payload = {k: v for k, v in payload.items() if v is not None}
        return jwt.encode(payload, key, algorithm="HS256")

    return _factory


def _event(authorization: str) -> dict:
    return {
        "type": "TOKEN",
        "authorizationToken": authorization,
        "methodArn": METHOD_ARN,
    }


class TestAuthorizer:
    """JWT オーソライザーのテスト"""

    def test_valid_token_is_allowed(self, token_factory, lambda_context):
        # Act
        result = handler.lambda_handler(
            _event(f"Bearer {token_factory(role='admin')}"), lambda_context
        )

        # Assert
        assert result["principalId"] == "alice"
        assert result["context"] == {"username": "alice", "role": "ADMIN"}
        statement = result["policyDocument"]["Statement"][0]
        assert statement["Effect"] == "Allow"
        assert statement["Resource"] == (
            "arn:aws:execute-api:ap-northeast-1:123456789012:abc123/prod/*/*"
        )

    def test_role_defaults_to_user(self, token_factory, lambda_context):
        result = handler.lambda_handler(
            _event(f"bearer {token_factory()}"), lambda_context
        )

        assert result["context"]["role"] == "USER"

    @pytest.mark.parametrize("authorization", ["", "Token abc", "Bearer "])
    def test_missing_bearer_token(self, authorization, lambda_context):
        with pytest.raises(Exception, match="Unauthorized"):
            handler.lambda_handler(_event(authorization), lambda_context)

    def test_wrong_signature(self, token_factory, lambda_context):
        token = token_factory(key="another-key")

        with pytest.raises(Exception, match="Unauthorized"):
            handler.lambda_handler(_event(f"Bearer {token}"), lambda_context)

    def test_expired_token(self, token_factory, lambda_context):
        token = token_factory(exp=int(time.time()) - 60)

        with pytest.raises(Exception, match="Unauthorized"):
            handler.lambda_handler(_event(f"Bearer {token}"), lambda_context)

    def test_token_without_subject(self, token_factory, lambda_context):
        token = token_factory(sub=None)

        with pytest.raises(Exception, match="Unauthorized"):
            handler.lambda_handler(_event(f"Bearer {token}"), lambda_context)
