from .auth import Principal as Principal
from .auth import Role as Role
from .auth import require_principal as require_principal
from .auth import require_role as require_role
from .error_handler import handle_api_errors as handle_api_errors
from .http_response import api_response as api_response
from .http_response import ok as ok
from .validators import to_decimal as to_decimal
