"""Domain exceptions mapped to HTTP responses in ``app.main``."""


class QuizException(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationException(QuizException):
    """A submission is missing a required field."""
    status_code = 400


class InvalidInputException(QuizException):
    """Answers handed to the scoring engine are out of shape."""
    status_code = 400


class StoreUnavailableException(QuizException):
    """Redis is unreachable or not configured."""
    status_code = 500


class DeserializationException(QuizException):
    """A leaderboard member is not a JSON object. Never surfaced to callers."""
    status_code = 500
