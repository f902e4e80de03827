"""
redisq

Publish to and consume from Redis list queues.

```
$ python -m redisq --uri redis://127.0.0.1 publish test '{"hello": "world"}'

$ python -m redisq -vv consume test --dead-letter dlq_test --count 1
```
"""
import argparse
import sys

import structlog as logging

from redisq import Envelope, Message, Outcome, Pipe, RedisQ
from redisq import logging_config


_LOGGER = logging.getLogger("redisq")


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="redisq", description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--uri", default=None, help="broker URI (defaults to REDIS_HOST/REDIS_PORT settings)")
    logging_config.configure_parser(parser)

    commands = parser.add_subparsers(dest="command", required=True)

    publish = commands.add_parser("publish", help="push message bodies onto a pipe")
    publish.add_argument("pipe")
    publish.add_argument("bodies", nargs="+", metavar="body")

    consume = commands.add_parser("consume", help="print message bodies popped off a pipe")
    consume.add_argument("pipe")
    consume.add_argument("--dead-letter", default=None, help="pipe receiving rejected messages")
    consume.add_argument("--count", type=int, default=None, help="stop after this many messages")
    consume.add_argument("--nack", action="store_true", help="reject every message instead of acking it")
    return parser


def _pipe(cli_args: argparse.Namespace) -> Pipe:
    pipe = Pipe(cli_args.pipe)
    if getattr(cli_args, "dead_letter", None):
        pipe = pipe.with_dead_letter(Pipe(cli_args.dead_letter))
    return pipe


def publish(cli_args: argparse.Namespace, connector) -> int:
    pipe = _pipe(cli_args)
    for body in cli_args.bodies:
        connector.publish(Envelope(pipe, Message(body)))
    _LOGGER.info("published messages", pipe=pipe.name, count=len(cli_args.bodies))
    return 0


def consume(cli_args: argparse.Namespace, connector, out=None) -> int:
    out = out if out is not None else sys.stdout
    if cli_args.count is not None and cli_args.count <= 0:
        raise ValueError("`--count` must be greater than 0 if provided")

    remaining = cli_args.count
    answer = Outcome.NACK if cli_args.nack else Outcome.ACK

    def _finish(outcome: Outcome) -> Outcome:
        nonlocal remaining
        if remaining is not None:
            remaining -= 1
            if remaining <= 0:
                outcome |= Outcome.EXIT
        return outcome

    def on_receive(envelope: Envelope) -> Outcome:
        body = envelope.message.body
        print(body.decode() if isinstance(body, bytes) else body, file=out)
        return _finish(answer)

    def on_error(envelope: Envelope, error: Exception) -> Outcome:
        _LOGGER.error("could not handle message", pipe=envelope.pipe.name, error=repr(error))
        return _finish(Outcome.NACK)

    connector.consume(_pipe(cli_args), on_receive, on_error, identification="redisq-cli")
    return 0


def main(argv=None) -> int:
    cli_args = get_parser().parse_args(argv)
    logging_config.configure_logging(cli_args)

    connector = RedisQ().connect(cli_args.uri)
    if cli_args.command == "publish":
        return publish(cli_args, connector)
    return consume(cli_args, connector)


if __name__ == "__main__":
    sys.exit(main())
