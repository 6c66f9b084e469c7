from channels.generic.websocket import AsyncJsonWebsocketConsumer

from apps.common import get_logger
from .broadcast import PRODUCTS_GROUP

logger = get_logger(__name__).bind(component="catalog", layer="consumer")


class ProductsConsumer(AsyncJsonWebsocketConsumer):
    """WebSocket endpoint of the real-time products page; inbound messages are ignored."""

    group_name = PRODUCTS_GROUP

    async def connect(self):
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()
        logger.info("Real-time client connected", channel=self.channel_name)

    async def disconnect(self, code):
        await self.channel_layer.group_discard(self.group_name, self.channel_name)
        logger.info("Real-time client disconnected", channel=self.channel_name, code=code)

    async def product_event(self, message):
        await self.send_json({"event": message["event"], "data": message["data"]})
