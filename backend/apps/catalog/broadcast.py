from typing import Any, Dict, Optional

from asgiref.sync import async_to_sync
from channels.layers import BaseChannelLayer, get_channel_layer

from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="broadcast")

PRODUCTS_GROUP = "products"

PRODUCT_CREATED = "productoCreado"
PRODUCT_UPDATED = "productoActualizado"
PRODUCT_DELETED = "productoEliminado"

# Channels dispatches on "type": "product.event" -> ProductsConsumer.product_event
MESSAGE_TYPE = "product.event"


class ProductBroadcaster:
    """
    Publishes product changes to every connected real-time client.

    Publishing is fire-and-forget: nothing is queued for clients that are not
    connected yet, and a failing channel layer is logged without ever
    reaching the API caller.
    """

    def __init__(
        self,
        channel_layer: Optional[BaseChannelLayer] = None,
        group: str = PRODUCTS_GROUP,
    ):
        self._channel_layer = channel_layer
        self.group = group
        self.logger = logger.bind(group=group)

    @property
    def channel_layer(self) -> Optional[BaseChannelLayer]:
        return self._channel_layer or get_channel_layer()

    def publish(self, event: str, data: Any) -> bool:
        layer = self.channel_layer
        if layer is None:
            self.logger.warning("No channel layer configured; event dropped", event=event)
            return False
        message: Dict[str, Any] = {"type": MESSAGE_TYPE, "event": event, "data": data}
        try:
            async_to_sync(layer.group_send)(self.group, message)
        except Exception as exc:
            self.logger.exception("Broadcast failed", event=event, error=str(exc))
            return False
        self.logger.debug("Broadcast published", event=event)
        return True

    def product_created(self, record: Dict[str, Any]) -> bool:
        return self.publish(PRODUCT_CREATED, dict(record))

    def product_updated(self, product_id: int) -> bool:
        return self.publish(PRODUCT_UPDATED, product_id)

    def product_deleted(self, product_id: int) -> bool:
        return self.publish(PRODUCT_DELETED, product_id)
