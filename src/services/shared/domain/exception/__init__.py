from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    ForbiddenException as ForbiddenException,
)
from .exceptions import (
    InvalidBookingException as InvalidBookingException,
)
from .exceptions import (
    OptimisticLockException as OptimisticLockException,
)
from .exceptions import (
    PaymentFailedException as PaymentFailedException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    SeatUnavailableException as SeatUnavailableException,
)
from .exceptions import (
    UnauthenticatedException as UnauthenticatedException,
)
