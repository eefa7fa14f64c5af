"""Domain exceptions raised by the service layer"""

from typing import Dict, List, Optional


class PortfolioServiceError(Exception):
    """Base exception for service-layer errors"""
    pass


class NotFoundError(PortfolioServiceError):
    """Requested entity does not exist"""

    def __init__(self, entity: str, identifier):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")


class DomainValidationError(PortfolioServiceError):
    """Input failed an application-level validation rule"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.errors = errors or []
        super().__init__(message)


class SlugConflictError(PortfolioServiceError):
    """Slug is already used by another row"""

    def __init__(self, slug: str, entity: str = "project"):
        self.slug = slug
        self.entity = entity
        super().__init__(f"Slug '{slug}' is already used by another {entity}")


class OrderingError(PortfolioServiceError):
    """Invalid move requested on an ordered sequence"""
    pass


class OrderPersistenceError(PortfolioServiceError):
    """Some order_index writes failed; the others were kept"""

    def __init__(self, failed_ids: list, total: int):
        self.failed_ids = failed_ids
        self.total = total
        super().__init__(
            f"Failed to update order for {len(failed_ids)} of {total} rows"
        )
