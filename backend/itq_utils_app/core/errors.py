# backend/itq_utils_app/core/errors.py


class UnsupportedOperationError(Exception):
    """
    Raised when a request names a method the service does not implement.
    """
    code = "notImplemented"

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method '{method}' is not implemented")
