"""Exceptions raised by the research workflow."""

from typing import Optional


class ResearchError(Exception):
    """Base class for every error the research workflow surfaces to users."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResearchAPIError(ResearchError):
    """The chat-completion API rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MissingAPIKeyError(ResearchError):
    def __init__(self, message: str = "Please enter your OpenAI API key first.") -> None:
        super().__init__(message)


class UnknownResearchTypeError(ResearchError):
    pass
