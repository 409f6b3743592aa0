"""
Pick'em error taxonomy.

Every condition here is local and recoverable: the caller informs the
user and, where it makes sense, retries.  ``code`` is stable and is what
the API layer maps to an HTTP status.
"""


class PickemError(Exception):
    """Base class for pick-session and visibility errors."""

    code = "pickem_error"

    def __init__(self, message: str = "", **context):
        super().__init__(message or self.__doc__)
        self.message = message or (self.__doc__ or "").strip()
        self.context = context


class AlreadySubmitted(PickemError):
    """A pick for this game has already been submitted and cannot be changed."""
    code = "already_submitted"


class LimitReached(PickemError):
    """The weekly pick limit has been reached."""
    code = "limit_reached"


class EmptySession(PickemError):
    """There are no selected picks to submit."""
    code = "empty_session"


class SubmissionFailed(PickemError):
    """Picks could not be saved.  Selections were kept; try again."""
    code = "submission_failed"


class SubmissionInProgress(PickemError):
    """A submission is already in progress for this session."""
    code = "submission_in_progress"


class ConfigUnavailable(PickemError):
    """League configuration is not available; picks are disabled."""
    code = "config_unavailable"


class InvalidSide(PickemError):
    """The side must be HOME or AWAY."""
    code = "invalid_side"


class GameNotOnSlate(PickemError):
    """The game is not on this week's slate."""
    code = "game_not_on_slate"


class LinesUnavailable(PickemError):
    """Lines for this game have not been published yet."""
    code = "lines_unavailable"


class GameStarted(PickemError):
    """The game has already kicked off."""
    code = "game_started"


class PickLocked(PickemError):
    """This pick is locked and cannot be modified."""
    code = "pick_locked"


class PickNotFound(PickemError):
    """Pick not found."""
    code = "pick_not_found"


class DataServiceError(RuntimeError):
    """Raised by data-service implementations when a read or write fails."""


class DataServiceTimeout(DataServiceError, TimeoutError):
    """The data service did not answer within the allowed time."""
