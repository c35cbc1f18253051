"""
Transport Exception Classes
"""


class TransportError(Exception):
    """Base class for transport errors"""
    pass


class TransportCreationError(TransportError):
    """
    Raised by TransportFactory.deliver() when create() hands back something
    that is not a Transport (None included).
    """
    def __init__(self, factory_name: str, returned: object):
        self.factory_name = factory_name
        self.returned = returned
        super().__init__(
            f"{factory_name}.create() returned {type(returned).__name__}, expected a Transport"
        )
