# /gradebook/services/exceptions.py

class GatewayError(Exception):
    """
    Raised when the backing store cannot complete a read or write.

    Routers turn it into a 503 so the client can show an error state with a
    retry action. A failed batch read never yields partial data.
    """

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        super().__init__(message or f"The data store could not complete '{operation}'. Please try again.")
