"""Base exception classes for IELTS Trainer."""


class IeltsTrainerException(Exception):
    """Base exception for all IELTS Trainer errors.

    All custom exceptions in the ielts_trainer package should inherit
    from this base class for consistent error handling.
    """

    pass
