"""
access_proxy.py — Protection proxy with access logging.

The Proxy exposes the same interface as the RealSubject. Before forwarding a
request it checks access; after forwarding it records the access. A denied
request returns None and never reaches the real subject.
"""

import copy
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

__all__ = ["Subject", "RealSubject", "Proxy", "client_code"]


class Subject(ABC):
    """Common interface of RealSubject and Proxy."""

    @abstractmethod
    def request(self) -> Optional[str]:
        raise NotImplementedError


class RealSubject(Subject):
    def __init__(self) -> None:
        self.calls = 0

    def request(self) -> str:
        self.calls += 1
        return "RealSubject: Handling request."


class Proxy(Subject):
    """
    Guards a RealSubject.

    The proxy works on its own copy of the subject it is given.

    :param real_subject: Subject to copy and guard.
    :param access_check: Callable deciding whether a request may proceed;
                         access is always granted when omitted.
    """

    def __init__(self, real_subject: RealSubject, access_check: Optional[Callable[[], bool]] = None) -> None:
        self._real_subject = copy.copy(real_subject)
        self._access_check = access_check
        self.access_log: List[datetime] = []

    @property
    def real_subject(self) -> RealSubject:
        return self._real_subject

    def _check_access(self) -> bool:
        logger.debug("Proxy: Checking access prior to firing a real request.")
        if self._access_check is None:
            return True
        return bool(self._access_check())

    def _log_access(self) -> None:
        at = datetime.now(timezone.utc)
        self.access_log.append(at)
        logger.info("Proxy: Logging the time of request: %s", at.isoformat())

    def request(self) -> Optional[str]:
        if not self._check_access():
            logger.warning("Proxy: Access denied, request not forwarded.")
            return None
        result = self._real_subject.request()
        self._log_access()
        return result


def client_code(subject: Subject) -> Optional[str]:
    return subject.request()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    print(client_code(real_subject))

    print("\nClient: Executing the same client code with a proxy:")
    print(client_code(Proxy(real_subject)))
