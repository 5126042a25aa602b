"""Custom exceptions for RoomBook."""
from __future__ import annotations


class RoomBookError(Exception):
    """Base exception for all RoomBook errors."""
    pass


class ConfigurationError(RoomBookError):
    """Raised when configuration is invalid or missing."""
    pass


class RoomSelectionError(RoomBookError):
    """Raised when a room kind or feature outside the catalog is selected."""
    pass


class BookingError(RoomBookError):
    """Raised when a booking flow step is invoked in an invalid state."""
    pass


class PaymentError(RoomBookError):
    """Raised when a payment amount is rejected."""
    pass
