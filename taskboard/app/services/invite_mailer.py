"""
Invitation email.

Runs detached from the request (FastAPI background task); its outcome is
never observed by the caller and a failure never rolls back the invite.
"""

import logging
from html import escape

from taskboard.app.services.mail_transport import IMailTransport

logger = logging.getLogger(__name__)


def render_invite_email(organization_name: str, invite_link: str, expiry_days: int):
    subject = f"You're invited to join {organization_name}!"
    name = escape(organization_name)
    link = escape(invite_link, quote=True)
    html_body = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h2 style="color: #333;">You're invited to join {name}!</h2>
        <p style="color: #666; font-size: 16px; line-height: 1.5;">
            Someone has invited you to collaborate on <strong>{name}</strong>.
            Click the button below to accept the invitation.
        </p>
        <div style="text-align: center; margin: 30px 0;">
            <a href="{link}" style="display: inline-block; padding: 12px 30px; background-color: #3b82f6;
                      color: white; text-decoration: none; border-radius: 5px; font-weight: bold;">
                Accept Invitation
            </a>
        </div>
        <p style="color: #666; font-size: 14px;">
            Or copy and paste this link in your browser:<br>
            <a href="{link}" style="color: #3b82f6; word-break: break-all;">{link}</a>
        </p>
        <p style="color: #999; font-size: 12px;">
            This invitation will expire in {expiry_days} days. If you didn't expect it, you can ignore this email.
        </p>
    </div>
    """
    return subject, html_body


def send_invite_email(
    transport: IMailTransport,
    to: str,
    organization_name: str,
    invite_link: str,
    expiry_days: int,
) -> None:
    subject, html_body = render_invite_email(organization_name, invite_link, expiry_days)
    try:
        delivered = transport.send(to, subject, html_body)
    except Exception:
        logger.exception(f"Invite email to {to} raised")
        return

    if not delivered:
        logger.warning(f"Invite email to {to} was not delivered")
