"""Error types raised while sanitizing venue data."""


class VenueGuardError(Exception):
    """Base class for venueguard errors."""
    pass


class InvalidUtf8Error(VenueGuardError):
    """Input text is not valid UTF-8."""
    pass


class VenueError(VenueGuardError):
    """Venue construction rejected one of its fields."""

    field = "venue"

    def __init__(self, message: str = None):
        super().__init__(message or f"Invalid venue {self.field}")


class InvalidLocationError(VenueError):
    """Venue location is empty."""
    field = "location"


class InvalidTitleError(VenueError):
    field = "title"


class InvalidAddressError(VenueError):
    field = "address"


class InvalidProviderError(VenueError):
    field = "provider"


class InvalidIdError(VenueError):
    field = "id"


class InvalidTypeError(VenueError):
    field = "type"
