"""Exception types raised by the note store, repository and localizer."""


class ProomyError(Exception):
    """Base class for all proomy-note errors."""


class StorageError(ProomyError):
    """A key-value store operation failed."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or f"storage operation failed for key '{key}'")


class StorageReadError(StorageError):
    def __init__(self, key: str):
        super().__init__(key, f"could not read key '{key}'")


class StorageWriteError(StorageError):
    def __init__(self, key: str):
        super().__init__(key, f"could not write key '{key}'")


class NoteValidationError(ProomyError):
    """A note cannot be committed (empty title)."""


class UnsupportedLanguageError(ProomyError):
    def __init__(self, code: str, supported: list[str]):
        self.code = code
        self.supported = supported
        super().__init__(f"Unsupported language: {code}. Supported: {supported}")
