"""Domain layer errors."""

from nuoidev.domain.value import VoteRejection


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteRejectedError(DomainError):
    """Raised when a vote is refused by the quota rules.

    Carries the voter's remaining quota so the caller can show it
    alongside the reason.
    """

    def __init__(self, kind: VoteRejection, remaining_votes: int, message: str):
        self.kind = kind
        self.remaining_votes = remaining_votes
        super().__init__(message)
