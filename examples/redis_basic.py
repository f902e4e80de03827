import os

from redisq import ConnectorFactory, Envelope, Message, Outcome, Pipe

connector = ConnectorFactory.create(f"redis://{os.getenv('REDIS_HOST', 'localhost')}")  # Normal port is 6379.

# Rejected messages are routed to the dead letter pipe.

pipe = Pipe("jobs").with_dead_letter(Pipe("dlq_jobs"))

connector.publish(Envelope(pipe, Message("hello")))
connector.publish(Envelope(pipe, Message("world")))


def on_receive(envelope):
    print(envelope.pipe.name, envelope.message.body)
    if envelope.message.body == b"world":
        return Outcome.NACK | Outcome.EXIT
    return Outcome.ACK


def on_error(envelope, error):
    raise error


connector.consume(pipe, on_receive, on_error)

# All connectors from redisq expose the underlying library for
# manual interaction.

r = connector.get_driver()
print(r.lrange("dlq_jobs", 0, -1))
