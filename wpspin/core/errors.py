"""Domain-specific errors for wpspin."""


class WpsPinError(Exception):
    """Base error for wpspin."""


class DerivationError(WpsPinError):
    """Raised when a strategy cannot derive a PIN for the given input."""


class MalformedInputError(DerivationError):
    """Raised when the BSSID or SSID does not meet a strategy's hard requirements."""


class MissingAuxiliaryDataError(DerivationError):
    """Raised when a serial-based strategy has no usable serial number."""


class SerialNotFoundError(MissingAuxiliaryDataError):
    """Raised when no serial record exists for a BSSID."""


class SerialEmptyError(MissingAuxiliaryDataError):
    """Raised when the serial record exists but carries no serial."""


class ProfileValidationError(WpsPinError):
    """Raised when a profile file does not conform to schema or semantics."""


class ProfileLoadError(WpsPinError):
    """Raised when loading profile sources fails."""


class StrategyResolutionError(WpsPinError):
    """Raised when a strategy name or code cannot be resolved."""
