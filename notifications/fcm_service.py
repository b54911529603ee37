"""
FCM Service - Firebase Cloud Messaging operations

This module builds chat push messages and sends them via Firebase Admin SDK.
The Firebase app is created once by the entry point and handed to FcmService.
"""
import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, messaging

from .config import (
    ANDROID_CONFIG,
    APNS_CONFIG,
    CLICK_ACTION,
    CLICK_ACTION_KEY,
    FIREBASE_CREDENTIALS_PATH,
)
from .request_parser import NotificationRequest

logger = logging.getLogger(__name__)


def init_firebase_app(credentials_path: Optional[str] = FIREBASE_CREDENTIALS_PATH,
                      name: str = '[DEFAULT]') -> firebase_admin.App:
    """
    Initialize Firebase Admin SDK.

    Args:
        credentials_path: Service account key file. None uses the application
            default credentials provided by the Cloud Functions runtime.
        name: Firebase app name

    Returns:
        firebase_admin.App

    Raises:
        FileNotFoundError: credentials_path is set but does not exist
    """
    if credentials_path is None:
        app = firebase_admin.initialize_app(name=name)
        logger.info(f"Firebase Admin SDK initialized with default credentials (app: {app.name})")
        return app

    if not os.path.exists(credentials_path):
        raise FileNotFoundError(
            f"Firebase credentials file not found at: {credentials_path}\n"
            "Please download it from Firebase Console > Project Settings > Service Accounts"
        )

    cred = credentials.Certificate(credentials_path)
    app = firebase_admin.initialize_app(cred, name=name)
    logger.info(f"Firebase Admin SDK initialized for project: {app.project_id}")
    return app


def build_message(request: NotificationRequest) -> messaging.Message:
    """
    Build the push message for a chat notification request.

    Args:
        request: Parsed request; request.token must be set

    Returns:
        messaging.Message addressed to request.token

    Example:
        build_message(parse_notification_request({'recipientFcmToken': 'tok123'}))
    """
    payload_data = dict(request.data)
    payload_data[CLICK_ACTION_KEY] = CLICK_ACTION

    return messaging.Message(
        notification=messaging.Notification(
            title=request.title,
            body=request.body,
        ),
        data=payload_data,
        token=request.token,
        # Android specific configuration
        android=messaging.AndroidConfig(
            priority=ANDROID_CONFIG['priority'],
            notification=messaging.AndroidNotification(
                sound=ANDROID_CONFIG['sound'],
                channel_id=ANDROID_CONFIG['channel_id'],
            ),
        ),
        # iOS (APNs) specific configuration
        apns=messaging.APNSConfig(
            payload=messaging.APNSPayload(
                aps=messaging.Aps(
                    sound=APNS_CONFIG['sound'],
                    badge=APNS_CONFIG['badge'],
                ),
            ),
        ),
    )


class FcmService:
    """Sends messages through FCM on behalf of one Firebase app."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.app = app

    def send(self, message: messaging.Message, dry_run: bool = False) -> str:
        """
        Send a single message. No retries; errors propagate to the caller.

        Returns:
            str: Message ID from Firebase
        """
        response = messaging.send(message, dry_run=dry_run, app=self.app)
        logger.debug(f"Message sent (ID: {response}, dry_run: {dry_run})")
        return response
