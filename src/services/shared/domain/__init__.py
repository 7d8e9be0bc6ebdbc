from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    ForbiddenException as ForbiddenException,
)
from .exception import (
    InvalidBookingException as InvalidBookingException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    PaymentFailedException as PaymentFailedException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    SeatUnavailableException as SeatUnavailableException,
)
from .exception import (
    UnauthenticatedException as UnauthenticatedException,
)
from .repository import Repository as Repository
from .repository import UnitOfWork as UnitOfWork
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
