"""RoomBook Core - In-memory room booking sessions"""

__version__ = "0.1.0"

# Core abstractions
from .base_config import RoomBookConfig

# Exceptions
from .exceptions import (
    RoomBookError,
    ConfigurationError,
    RoomSelectionError,
    BookingError,
    PaymentError,
)

# Config management
from .config import get_config, set_config

# Domain
from .models import (
    BaseRoom,
    DecoratedRoom,
    Feature,
    GuestRecord,
    RoomKind,
    applied_features,
    decorate,
    wrap,
)
from .services import (
    BookingRegistry,
    BookingService,
    PaymentMethod,
    PaymentSelector,
    RoomFactory,
)

__all__ = [
    # Version
    "__version__",

    # Core
    "RoomBookConfig",

    # Exceptions
    "RoomBookError",
    "ConfigurationError",
    "RoomSelectionError",
    "BookingError",
    "PaymentError",

    # Config
    "get_config",
    "set_config",

    # Domain
    "BaseRoom",
    "DecoratedRoom",
    "Feature",
    "GuestRecord",
    "RoomKind",
    "applied_features",
    "decorate",
    "wrap",

    # Services
    "BookingRegistry",
    "BookingService",
    "PaymentMethod",
    "PaymentSelector",
    "RoomFactory",
]
