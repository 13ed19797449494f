class SnapshotFetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UnauthorizedError(Exception):
    def __init__(self, message: str = "Unauthorized"):
        self.message = message
        super().__init__(message)


class InvalidUsernameError(Exception):
    def __init__(self, message: str = "username required in path"):
        self.message = message
        super().__init__(message)
