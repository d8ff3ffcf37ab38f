"""
Mail delivery for the forget password flow.
"""
import smtplib
import logging
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

logger = logging.getLogger(__name__)


class SmtpEmailService:
    """Sends mails through an authenticated SMTP server (STARTTLS)."""

    def __init__(self, server: str, port: int, username: str, password: str, from_email: Optional[str] = None):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username

    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> None:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = self.from_email
        msg['To'] = to

        msg.attach(MIMEText(text, 'plain'))
        if html:
            msg.attach(MIMEText(html, 'html'))

        with smtplib.SMTP(self.server, self.port) as server:
            server.starttls()
            server.login(self.username, self.password)
            server.send_message(msg)

        logger.info("Email sent: to=%s subject=%s", to, subject)


class LogEmailService:
    """Dev setups: write the mail to the logs instead of sending it."""

    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> None:
        logger.info("[DEV] Email to=%s subject=%s body=%s", to, subject, text)
