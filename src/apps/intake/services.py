"""Intake app services."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from .models import Submission
from .sanitizers import sanitize_name
from .store import SubmissionStore
from .uploads import UploadedImage, place_upload, save_upload

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "email", "phone", "whatsapp", "productDetails")


class NotificationError(Exception):
    """The operator notification could not be sent."""


class MailCredentialsMissing(NotificationError):
    """GMAIL_USER or GMAIL_PASS is not configured."""


class TooManyImages(ValueError):
    """More images were uploaded than a submission can hold."""


def compose_notification_html(submission: Submission) -> str:
    """Render the HTML body of the operator notification."""
    return render_to_string("emails/request_notification.html", {"submission": submission})


def send_notification(html: str, name: str | None) -> None:
    """
    Send the notification email through the configured SMTP relay.

    Args:
        html: Rendered HTML body, see :func:`compose_notification_html`.
        name: Client name for the subject line.

    Raises:
        MailCredentialsMissing: relay credentials are not configured.
        smtplib.SMTPException: the relay rejected the message.
    """
    user = settings.GMAIL_USER
    password = settings.GMAIL_PASS
    if not user or not password:
        raise MailCredentialsMissing("Missing GMAIL_USER or GMAIL_PASS in environment")

    recipient = settings.NOTIFY_TO or user
    connection = get_connection(username=user, password=password, fail_silently=False)
    msg = EmailMultiAlternatives(
        subject=f"New client request: {name or 'Unknown'} is searching for a product",
        body=strip_tags(html),
        from_email=f"{settings.NOTIFICATION_SENDER_NAME} <{user}>",
        to=[recipient],
        connection=connection,
    )
    msg.attach_alternative(html, "text/html")
    msg.send(fail_silently=False)
    logger.info("Request notification sent to %s for %s", recipient, name or "Unknown")


async def process_submission(
    fields: Mapping[str, str | None],
    files: Sequence[UploadedImage],
    *,
    store: SubmissionStore,
    uploads_root: Path,
) -> Submission:
    """
    Store the uploaded images, persist the submission and notify the operator.

    The record is persisted before the notification is attempted, so a
    notification failure leaves the submission and its files in place.
    """
    if len(files) > settings.MAX_UPLOAD_IMAGES:
        raise TooManyImages(f"Received {len(files)} images, at most {settings.MAX_UPLOAD_IMAGES} allowed")

    loop = asyncio.get_running_loop()
    client_folder = sanitize_name(fields.get("name"))

    images: list[str] = []
    for upload in files:
        placement = place_upload(uploads_root, client_folder, upload.name)
        images.append(await loop.run_in_executor(None, save_upload, placement, upload))

    submission = Submission.create(
        name=fields.get("name"),
        email=fields.get("email"),
        phone=fields.get("phone"),
        whatsapp=fields.get("whatsapp"),
        product_details=fields.get("productDetails"),
        images=images,
    )
    await loop.run_in_executor(None, store.append, submission.to_dict())
    logger.info("Stored submission %s with %d image(s)", submission.id, len(images))

    html = compose_notification_html(submission)
    await loop.run_in_executor(None, send_notification, html, submission.name)
    return submission
