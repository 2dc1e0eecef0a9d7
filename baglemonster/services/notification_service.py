# baglemonster/services/notification_service.py
from baglemonster.celery_worker import celery_app
from baglemonster.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: int, cart_id: int):
        """
        Wysyła powiadomienie o złożeniu zamówienia z koszyka.
        """
        send_order_notification_task.delay(user_id, cart_id)


@celery_app.task(name="baglemonster.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: int, cart_id: int):
    # TODO: podpiac prawdziwy kanal (email/SMS) zamiast samego logu
    logger.info(f"[NOTIFICATION] User {user_id}: cart {cart_id} has been ordered")

    return {"user_id": user_id, "cart_id": cart_id, "status": "sent"}
