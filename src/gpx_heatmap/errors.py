"""Errors raised when track input violates the projection contract."""


class TrackDataError(ValueError):
    """Base class for invalid track input."""


class EmptyInputError(TrackDataError):
    """Raised when there are no tracks, no points, or an empty track."""

    def __init__(self, message: str = "no track points to process", track_index: int | None = None) -> None:
        if track_index is not None:
            message = f"{message} (track {track_index})"
        super().__init__(message)
        self.track_index = track_index


class MissingElevationError(TrackDataError):
    """Raised when a point without elevation reaches the projector."""

    def __init__(self, track_index: int, point_index: int) -> None:
        super().__init__(f"missing elevation at track {track_index}, point {point_index}")
        self.track_index = track_index
        self.point_index = point_index
