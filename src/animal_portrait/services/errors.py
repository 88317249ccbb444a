"""Errors raised by wizard services."""


class StoreWriteError(RuntimeError):
    """The external store rejected a write or could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StepActionError(ValueError):
    """An action was rejected by the current step's local state."""


class UnsupportedFileError(StepActionError):
    """The selected file is not an image."""


class FileTooLargeError(StepActionError):
    """The selected file exceeds the upload size limit."""


class WrongStepError(RuntimeError):
    """An action targeted a step that is not current."""
