"""Exception hierarchy for Smoothstroke."""


class SmoothStrokeError(Exception):
    """Base exception for all Smoothstroke errors."""

    pass


class StrokeError(SmoothStrokeError):
    """Errors caused by feeding a stroke incorrectly."""

    pass


class InvalidPointError(StrokeError):
    """Point has non-finite coordinates."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Point has non-finite coordinates: ({x}, {y})")


class TimestampRegressionError(StrokeError):
    """Point timestamp is earlier than the previous point's."""

    def __init__(self, previous_t: int, t: int) -> None:
        self.previous_t = previous_t
        self.t = t
        super().__init__(f"Timestamp went backwards: {t} ms after {previous_t} ms")


class StrokeFinishedError(StrokeError):
    """Point fed after the terminal point was processed."""

    def __init__(self) -> None:
        super().__init__("Stroke already finished; create a new processor per gesture")


class EmptyStrokeError(StrokeError):
    """Stroke has no points to replay."""

    def __init__(self) -> None:
        super().__init__("Cannot replay a stroke with no points")


class StrokeIOError(SmoothStrokeError):
    """Errors related to loading or saving stroke files."""

    pass


class StrokeLoadError(StrokeIOError):
    """Error loading a stroke file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load stroke '{path}': {reason}")


class StrokeFormatError(StrokeIOError):
    """Stroke file content is malformed."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid stroke format '{path}': {details}")


class StrokeSaveError(StrokeIOError):
    """Error saving a stroke or stamp file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
