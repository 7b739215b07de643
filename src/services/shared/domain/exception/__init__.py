from .exceptions import (
    AuthenticationException as AuthenticationException,
)
from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    ConfigurationException as ConfigurationException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    GatewayRejectedException as GatewayRejectedException,
)
from .exceptions import (
    GatewayUnavailableException as GatewayUnavailableException,
)
from .exceptions import (
    InvalidRangeException as InvalidRangeException,
)
from .exceptions import (
    PaymentNotCompleteException as PaymentNotCompleteException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exceptions import (
    StorageUnavailableException as StorageUnavailableException,
)
from .exceptions import (
    ValidationException as ValidationException,
)
