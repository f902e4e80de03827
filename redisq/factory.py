"""
Look up connectors by the scheme of a connection URI.

e.g. `redis://127.0.0.1` is handled by whichever connector lists "redis" in
its `schema()`.
"""
from typing import Dict, Type, Union
from urllib.parse import SplitResult, urlsplit

import structlog as logging

from redisq.common.queue import Connector
from redisq.utils import listify


_LOGGER = logging.getLogger(__name__)


class ConnectorFactory:
    connectors: Dict[str, Type[Connector]] = {}

    @staticmethod
    def register_connector(connector_cls: Type[Connector]) -> Type[Connector]:
        for scheme in listify(connector_cls.schema()):
            ConnectorFactory.connectors[scheme] = connector_cls
            _LOGGER.debug("registered connector", scheme=scheme, connector=connector_cls.__name__)
        return connector_cls

    @staticmethod
    def create(uri: Union[str, SplitResult]) -> Connector:
        if isinstance(uri, str):
            uri = urlsplit(uri)
        try:
            connector_cls = ConnectorFactory.connectors[uri.scheme]
        except KeyError:
            known = ", ".join(sorted(ConnectorFactory.connectors)) or "none"
            raise ValueError(f"no connector registered for scheme `{uri.scheme}` (known: {known})") from None
        connector = connector_cls()
        connector.set_up(uri)
        return connector
