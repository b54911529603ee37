"""
Configuration for the chat notification functions.

Credentials are normally managed by the Cloud Functions runtime. For local
runs, download a service account key from
Firebase Console > Project Settings > Service Accounts > Generate new private key
and point FIREBASE_CREDENTIALS_PATH at it.
"""
import os

# Path to Firebase Admin SDK credentials (None = application default credentials)
FIREBASE_CREDENTIALS_PATH = os.environ.get('FIREBASE_CREDENTIALS_PATH') or None

# Only used by the manual smoke script; the platform owns logging in production
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Firestore documents the triggers are registered on
NOTIFICATION_REQUESTS_DOCUMENT = 'notificationRequests/{requestId}'
USERS_DOCUMENT = 'users/{userId}'

# Fields that may hold the token, in order of priority
RECIPIENT_TOKEN_FIELDS = ['recipientFcmToken', 'recipientToken']
DEVICE_TOKEN_FIELDS = ['fcmToken', 'deviceToken']

# Used when the request leaves title/body empty
DEFAULT_NOTIFICATION = {
    'title': '새 메시지',
    'body': '메시지가 도착했습니다',
}

# Data entry the Flutter client routes on when the notification is tapped
CLICK_ACTION_KEY = 'click_action'
CLICK_ACTION = 'FLUTTER_NOTIFICATION_CLICK'

# Android specific delivery hints
ANDROID_CONFIG = {
    'priority': 'high',
    'sound': 'default',
    'channel_id': 'chat_messages',
}

# iOS (APNs) specific delivery hints
APNS_CONFIG = {
    'sound': 'default',
    'badge': 1,
}
