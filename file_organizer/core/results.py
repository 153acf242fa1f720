# file_organizer/core/results.py

from dataclasses import dataclass
from enum import Enum

# The text tags every backend command uses to report its outcome.
ERROR_TAG = "Error:"
SUCCESS_TAG = "Success:"


class Severity(Enum):
    """How a finished command should be presented to the user."""
    SUCCESS = "success"
    ERROR = "error"

    @classmethod
    def parse(cls, value) -> "Severity | None":
        """Accepts a Severity or its string value. Anything else yields None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def strip_tag(text: str) -> str:
    """
    Removes the severity tag from a command's text result.

    The text is cut after the first "Error:", then whatever remains is cut
    after the first "Success:". Each cut only applies when its tag is present,
    so "Error: a Success: b" becomes " b". Untagged text is returned as-is.
    """
    if ERROR_TAG in text:
        text = text.partition(ERROR_TAG)[2]
    if SUCCESS_TAG in text:
        text = text.partition(SUCCESS_TAG)[2]
    return text


@dataclass(frozen=True)
class OrganizeResult:
    """The classified outcome of one settled backend command."""
    severity: Severity
    message: str
    raw_text: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @classmethod
    def from_text(cls, text: str) -> "OrganizeResult":
        """Error if the text starts with the "Error:" tag, success otherwise."""
        severity = Severity.ERROR if text.startswith(ERROR_TAG) else Severity.SUCCESS
        return cls(severity=severity, message=strip_tag(text), raw_text=text)

    @classmethod
    def from_tagged_text(cls, text: str) -> "OrganizeResult | None":
        """
        Strict variant for commands that always tag both outcomes.
        Returns None when the text starts with neither tag.
        """
        if text.startswith(ERROR_TAG):
            return cls(Severity.ERROR, strip_tag(text), text)
        if text.startswith(SUCCESS_TAG):
            return cls(Severity.SUCCESS, strip_tag(text), text)
        return None
