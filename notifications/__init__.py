"""
Chat Notifications Module

Firestore-triggered handlers that send FCM push notifications for chat:
- New notificationRequests document -> push to the recipient, delete the request
- Updated users document -> log FCM token changes

Entry point:
    main.py (Firebase Cloud Functions)
"""

from .fcm_service import FcmService, build_message, init_firebase_app
from .handlers import NotificationDispatcher, handle_user_updated, observe_profile_update
from .request_parser import (
    NotificationRequest,
    changed_device_token_fields,
    extract_token,
    normalize_data,
    parse_notification_request,
)

__all__ = [
    'FcmService',
    'build_message',
    'init_firebase_app',
    'NotificationDispatcher',
    'handle_user_updated',
    'observe_profile_update',
    'NotificationRequest',
    'changed_device_token_fields',
    'extract_token',
    'normalize_data',
    'parse_notification_request',
]
