from abc import ABC, abstractmethod


class IMailTransport(ABC):
    """Outbound email - application layer"""

    @abstractmethod
    def send(self, to: str, subject: str, html_body: str) -> bool:
        """Send an HTML email. Returns False when delivery failed."""
        pass
