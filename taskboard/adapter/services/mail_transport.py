"""
SMTP mail transport.

When MAIL_SERVER is not configured, emails are logged but not sent
(dev/test mode).
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from taskboard.app.services.mail_transport import IMailTransport

logger = logging.getLogger(__name__)


class SmtpMailTransport(IMailTransport):
    def __init__(
        self,
        server: Optional[str],
        port: int = 587,
        use_tls: bool = True,
        username: Optional[str] = None,
        password: Optional[str] = None,
        default_sender: str = "noreply@taskboard.local",
        timeout: float = 10.0,
    ):
        self.server = server
        self.port = port
        self.use_tls = use_tls
        self.username = username
        self.password = password
        self.default_sender = default_sender
        self.timeout = timeout

    def send(self, to: str, subject: str, html_body: str) -> bool:
        if not self.server:
            logger.info(f"[log-only] Email to={to} subject={subject!r}")
            return True

        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = self.default_sender
        message["To"] = to
        message.attach(MIMEText(html_body, "html", "utf-8"))

        try:
            with smtplib.SMTP(self.server, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password or "")
                smtp.sendmail(self.default_sender, [to], message.as_string())
        except (smtplib.SMTPException, OSError):
            logger.exception(f"Failed to send email to {to}")
            return False

        logger.info(f"Email sent to {to}")
        return True
