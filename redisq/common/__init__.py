class AbstractClient:
    """
    The AbstractClient is a general wrapper structure for broker clients with
    pre-existing client libraries.

    The raw client is preserved for the user to manipulate internals as necessary
    while otherwise providing convenience functions on top. Connectors may leave
    it unset until the first call that needs a connection.
    """

    def __init__(self, raw_client=None, **kwargs):
        self.raw_client = raw_client
        self.meta = kwargs
