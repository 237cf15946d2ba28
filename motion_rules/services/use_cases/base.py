"""
Use case base.

A use case is one engine operation behind a request/response pair. Hosts
(a server, a CLI, a batch job) call `execute` and never wire the services
together themselves.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """Synchronous engine operation: RequestT in, ResponseT out."""

    @abstractmethod
    def execute(self, request: RequestT) -> ResponseT:
        """Run the operation. Domain outcomes go in the response; faults raise."""
