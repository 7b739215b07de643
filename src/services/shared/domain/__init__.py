from .entity import Entity as Entity
from .exception import (
    AuthenticationException as AuthenticationException,
)
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
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
from .value_object import (
    AuthContext as AuthContext,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    HotelId as HotelId,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    RoomId as RoomId,
)
from .value_object import (
    UserId as UserId,
)
