"""
Firestore trigger handlers for chat notifications.

NotificationDispatcher turns each new notificationRequests document into one
FCM push and removes the request afterwards. observe_profile_update logs when
a user's device token changes. Both are plain functions of the document data,
so the Cloud Functions wiring in main.py stays a thin adapter.
"""
import logging
from typing import Any, Mapping, Optional

from .fcm_service import FcmService, build_message
from .request_parser import changed_device_token_fields, parse_notification_request

logger = logging.getLogger(__name__)


def _snapshot_data(snapshot: Any) -> dict:
    if snapshot is None:
        return {}
    return snapshot.to_dict() or {}


class NotificationDispatcher:
    """Sends the push for a notification request and deletes the request."""

    def __init__(self, messenger: FcmService):
        """
        Args:
            messenger: Object with send(message) -> message id, e.g. FcmService
        """
        self.messenger = messenger

    def dispatch(self, request_id: str, document: Optional[Mapping], reference) -> Optional[str]:
        """
        Process one notificationRequests document.

        Args:
            request_id: Document ID, used in log lines
            document: Document data
            reference: DocumentReference of the request, deleted once the send
                has been attempted

        Returns:
            str: Message ID from Firebase, or None if nothing was delivered
        """
        request = parse_notification_request(document)

        if not request.token:
            # Request is left in place when no token is present
            logger.warning(f"Notification request {request_id} has no FCM token; cannot send notification")
            return None

        message = build_message(request)

        try:
            response = self.messenger.send(message)
        except Exception as e:
            logger.error(
                f"Failed to send notification for request {request_id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            # Deleted anyway so the trigger does not reprocess it
            reference.delete()
            return None

        logger.info(f"Notification sent for request {request_id} (ID: {response})")
        reference.delete()
        return response

    def handle_created(self, event: Any) -> Optional[str]:
        """Adapt a Firestore document-created event to dispatch()."""
        request_id = event.params.get('requestId')
        snapshot = event.data
        if snapshot is None:
            logger.warning(f"Notification request {request_id} event carried no document")
            return None
        return self.dispatch(request_id, _snapshot_data(snapshot), snapshot.reference)


def observe_profile_update(user_id: str, before: Optional[Mapping], after: Optional[Mapping]) -> bool:
    """
    Log when a user's FCM token was added or changed.

    Returns:
        True if a token field changed (and one line was logged)
    """
    if changed_device_token_fields(before, after):
        logger.info(f"FCM token updated for user {user_id}")
        return True

    return False


def handle_user_updated(event: Any) -> bool:
    """Adapt a Firestore document-updated event to observe_profile_update()."""
    change = event.data
    return observe_profile_update(
        event.params.get('userId'),
        _snapshot_data(change.before if change is not None else None),
        _snapshot_data(change.after if change is not None else None),
    )
