"""
Request Parser - Extracts notification fields from Firestore documents.

Handles the shapes written by the chat client:
- Token under either field name: {"recipientFcmToken": "..."} or {"recipientToken": "..."}
- Optional title/body, falling back to the default chat notification text
- Optional data mapping, coerced to the string-only payload FCM accepts

Usage:
    from .request_parser import parse_notification_request, changed_device_token_fields

    request = parse_notification_request({'recipientFcmToken': 'tok', 'title': 'Hi'})
    # Returns: NotificationRequest(token='tok', title='Hi', body='메시지가 도착했습니다', data={})

    fields = changed_device_token_fields({'fcmToken': 'A'}, {'fcmToken': 'B'})
    # Returns: ['fcmToken']
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, NamedTuple, Optional

from .config import DEFAULT_NOTIFICATION, DEVICE_TOKEN_FIELDS, RECIPIENT_TOKEN_FIELDS

logger = logging.getLogger(__name__)


class NotificationRequest(NamedTuple):
    """A parsed notificationRequests document."""
    token: Optional[str]
    title: str
    body: str
    data: Dict[str, str]


def extract_token(document: Optional[Mapping], fields: List[str]) -> Optional[str]:
    """
    Return the first non-empty token among the given fields.

    Args:
        document: Document data (None is treated as an empty document)
        fields: Candidate field names, in order of priority

    Returns:
        Token as string, or None if every field is missing or empty

    Examples:
        >>> extract_token({'fcmToken': '', 'deviceToken': 'B'}, ['fcmToken', 'deviceToken'])
        'B'
        >>> extract_token({}, ['fcmToken'])
    """
    if not document:
        return None

    for field in fields:
        value = document.get(field)
        if value:
            return value if isinstance(value, str) else str(value)

    return None


def normalize_data(data: Any) -> Dict[str, str]:
    """
    Coerce a data payload to the str -> str mapping FCM requires.

    Missing data yields an empty payload. Anything that is not a mapping is
    dropped with a warning.
    """
    if data is None:
        return {}

    if not isinstance(data, Mapping):
        logger.warning(f"Ignoring non-mapping notification data of type {type(data).__name__}")
        return {}

    return {str(k): v if isinstance(v, str) else str(v) for k, v in data.items()}


def _text_or_default(value: Any, default: str) -> str:
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def parse_notification_request(document: Optional[Mapping]) -> NotificationRequest:
    """
    Parse a notificationRequests document.

    Args:
        document: Document data as returned by DocumentSnapshot.to_dict()

    Returns:
        NotificationRequest with defaults applied. token is None when the
        document carries no usable recipient token.
    """
    document = document or {}
    return NotificationRequest(
        token=extract_token(document, RECIPIENT_TOKEN_FIELDS),
        title=_text_or_default(document.get('title'), DEFAULT_NOTIFICATION['title']),
        body=_text_or_default(document.get('body'), DEFAULT_NOTIFICATION['body']),
        data=normalize_data(document.get('data')),
    )


def changed_device_token_fields(before: Optional[Mapping], after: Optional[Mapping]) -> List[str]:
    """
    List the device token fields whose value was added or changed.

    Each field is compared with its own previous value, so a token that
    disappears from one field while another stays put is not a change.

    Examples:
        >>> changed_device_token_fields({'fcmToken': 'A'}, {'fcmToken': 'B'})
        ['fcmToken']
        >>> changed_device_token_fields({'fcmToken': 'A', 'deviceToken': 'X'}, {'deviceToken': 'X'})
        []
    """
    changed = []
    for field in DEVICE_TOKEN_FIELDS:
        token_after = extract_token(after, [field])
        if token_after and token_after != extract_token(before, [field]):
            changed.append(field)
    return changed
