from unittest.mock import patch

from baglemonster.services.notification_service import (
    NotificationService,
    send_order_notification_task,
)


def test_send_enqueues_task():
    with patch.object(send_order_notification_task, "delay") as delay:
        NotificationService().send_order_notification(1, 42)

    delay.assert_called_once_with(1, 42)


def test_task_body():
    assert send_order_notification_task(1, 42) == {"user_id": 1, "cart_id": 42, "status": "sent"}
