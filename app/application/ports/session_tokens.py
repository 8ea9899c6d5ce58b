from abc import ABC, abstractmethod


class SessionTokenPort(ABC):
    @abstractmethod
    def issue(self) -> str:
        """Return a new opaque admin session token."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str | None) -> bool:
        """True if token is genuine and not expired."""
        raise NotImplementedError
