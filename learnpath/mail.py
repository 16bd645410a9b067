## Outbound email
import logging
import smtplib
from abc import ABC, abstractmethod
from email.mime.text import MIMEText
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from learnpath.settings import Settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Environment(loader=FileSystemLoader(TEMPLATES_DIR), keep_trailing_newline=True)


class Mailer(ABC):
    @abstractmethod
    def send(self, *, to: str, subject: str, body: str) -> None:
        raise NotImplementedError


class SMTPMailer(Mailer):
    def __init__(self, *, host: str, port: int, username: str, password: str, sender: str):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender

    def send(self, *, to: str, subject: str, body: str) -> None:
        msg = MIMEText(body, "plain", "utf-8")
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject

        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.sendmail(self.sender, [to], msg.as_string())
        logger.info("Sent %r email to %s", subject, to)


class LoggingMailer(Mailer):
    """Used when SMTP is not configured; records that a mail would have gone out."""

    def send(self, *, to: str, subject: str, body: str) -> None:
        logger.warning("SMTP not configured, dropping %r email to %s", subject, to)


def build_mailer(settings: Settings) -> Mailer:
    if not settings.smtp_host:
        return LoggingMailer()
    return SMTPMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        sender=settings.mail_from or settings.smtp_username,
    )


def render_password_reset(*, reset_code: str, ttl_minutes: int) -> str:
    return templates.get_template("password_reset.txt").render(
        reset_code=reset_code, ttl_minutes=ttl_minutes,
    )
