"""Use cases de push notification."""

from app.use_cases.push.send_notification import SendPushNotificationUseCase

__all__ = ["SendPushNotificationUseCase"]
