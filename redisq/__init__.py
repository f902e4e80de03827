from redisq.common.queue import Connector, Envelope, Message, Outcome, Pipe
from redisq.data.redis import RedisQueueConnector
from redisq.factory import ConnectorFactory
from redisq.settings import Settings, configure


__all__ = ["RedisQ", "Connector", "ConnectorFactory", "Envelope", "Message", "Outcome", "Pipe", "RedisQueueConnector"]
__version__ = "0.1.0"


ConnectorFactory.register_connector(RedisQueueConnector)


class RedisQ(ConnectorFactory, Settings):
    """**The redisq API.**

    redisq lets message-queue code publish to and consume from Redis lists
    with ack/nack/requeue semantics and dead letter queues.

    ```
    rq = RedisQ()
    rq.configure(redis_host="redis.service.consul")
    connector = rq.connect()
    ```
    """

    @configure
    def connect(self, uri=None) -> Connector:
        return self.create(uri if uri is not None else self.settings["uri"])
