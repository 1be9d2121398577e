class BuildError(RuntimeError):
    """The dataset build cannot complete; nothing is written."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class DatasetNotBuiltError(FileNotFoundError):
    """A packaged data artifact is missing. Run `aviation-codes-build` first."""
