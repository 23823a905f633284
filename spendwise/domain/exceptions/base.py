"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for spendwise's domain errors.

    Every subclass carries a stable machine-readable ``code`` (e.g.
    ``TRANSACTION_NOT_FOUND``) next to its human-readable message; the
    API returns both in the error body.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}
