"""
Firebase Cloud Functions entry point.

Registers the chat notification triggers:
  notificationRequests/{requestId} created -> send FCM push, delete request
  users/{userId} updated                   -> log FCM token changes
"""

from firebase_functions import firestore_fn

from notifications.config import NOTIFICATION_REQUESTS_DOCUMENT, USERS_DOCUMENT
from notifications.fcm_service import FcmService, init_firebase_app
from notifications.handlers import NotificationDispatcher, handle_user_updated

app = init_firebase_app()
dispatcher = NotificationDispatcher(FcmService(app))


@firestore_fn.on_document_created(document=NOTIFICATION_REQUESTS_DOCUMENT)
def send_chat_notification(event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None]) -> None:
    """Send a push notification for each new notification request."""
    dispatcher.handle_created(event)


@firestore_fn.on_document_updated(document=USERS_DOCUMENT)
def on_user_update(event: firestore_fn.Event[firestore_fn.Change]) -> None:
    """Log when a user's FCM token is added or changed."""
    handle_user_updated(event)
