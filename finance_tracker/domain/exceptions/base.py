"""Root of the finance tracker's error hierarchy."""


class DomainException(Exception):
    """
    An expected failure of a transaction or dashboard operation.

    ``code`` is a stable, machine-readable identifier that the API returns
    in the ``error`` field; ``message`` is the human-readable text.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
