class PathNotFoundError(FileNotFoundError):
    """Listed path does not exist."""

    def __init__(self, path: str):
        super().__init__(f"No such file or directory: '{path}'")
        self.path = path


class EnumerationDeniedError(OSError):
    """Listed path exists but cannot be enumerated."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot list '{path}': {reason}")
        self.path = path
        self.reason = reason
