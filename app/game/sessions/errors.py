class QuizSessionError(Exception):
    pass


class SessionNotStartedError(QuizSessionError):
    pass


class EmptyQuestionSetError(QuizSessionError):
    pass


class QuizCompleteError(QuizSessionError):
    """Raised where a question is required but every question has been passed."""


class InvalidAnswerOptionError(QuizSessionError):
    pass


class InvalidJumpTargetError(QuizSessionError):
    pass
