import pytest
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.exception import (
    ForbiddenException,
    UnauthenticatedException,
)
from services.shared.utils import Principal, Role, require_principal, require_role


def _event(authorizer: dict | None) -> APIGatewayProxyEvent:
    request_context = {} if authorizer is None else {"authorizer": authorizer}
    return APIGatewayProxyEvent({"requestContext": request_context})


class TestPrincipal:
    def test_from_authorizer_context(self):
        event = _event({"username": "alice", "role": "admin"})

        principal = Principal.from_event(event)

        assert principal == Principal(username="alice", role=Role.ADMIN)

    def test_missing_context_returns_none(self):
        assert Principal.from_event(_event(None)) is None

    def test_unknown_role_returns_none(self):
        assert Principal.from_event(_event({"username": "a", "role": "ROOT"})) is None


class TestRequireRole:
    def test_unauthenticated_without_principal(self):
        with pytest.raises(UnauthenticatedException):
            require_principal(_event(None))

    def test_user_cannot_perform_admin_operation(self):
        event = _event({"username": "bob", "role": "USER"})

        with pytest.raises(ForbiddenException, match="Role ADMIN is required"):
            require_role(event, Role.ADMIN)

    def test_admin_is_granted_user_operations(self):
        event = _event({"username": "alice", "role": "ADMIN"})

        principal = require_role(event, Role.USER)

        assert principal.username == "alice"
