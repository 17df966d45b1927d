"""Error taxonomy for moodlog."""


class MoodlogError(Exception):
    """Base class for every error moodlog raises on purpose."""


class ValidationError(MoodlogError, ValueError):
    """Bad input to a write (empty entry, out-of-range mood, future date)."""


class BackendError(MoodlogError):
    """I/O failure in the key/value storage substrate."""


class DecodeError(MoodlogError, ValueError):
    """A stored value could not be parsed into an entry."""


class CorruptEntry(DecodeError):
    """A stored entry exists but does not decode."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Entry {key} is corrupt: {reason}")
        self.key = key
        self.reason = reason
