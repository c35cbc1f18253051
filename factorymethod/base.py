"""
Base Transport Interfaces

The Factory Method Pattern is a creational design pattern that provides an
interface for creating objects in a superclass, but allows subclasses to alter
the type of objects that will be created.

Transport is the product every factory hands out. TransportFactory is the
creator: subclasses override create() to decide which Transport gets built.
"""

from abc import ABC, abstractmethod
import logging

from .exceptions import TransportCreationError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """
    Base class for all transports.

    A transport has no state; it only knows how to perform its move.
    """

    message = ""

    @abstractmethod
    def perform(self) -> None:
        """
        Perform the transport's move.

        Writes the transport's message to standard output. Never raises.
        """
        pass


class TransportFactory(ABC):
    """
    Base class for all transport factories.

    Key principles:
    - create() always returns a new, fully constructed Transport
    - Each concrete factory builds exactly one Transport type
    - Factories hold no state, so they are safe to share between threads
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def create(self) -> Transport:
        """
        Create a transport.

        Returns:
            A fresh Transport instance (never cached between calls)
        """
        pass

    def deliver(self) -> Transport:
        """
        Create a transport and perform its move

        Returns:
            The transport that was created and performed

        Raises:
            TransportCreationError: If create() did not return a Transport
        """
        transport = self.create()
        if not isinstance(transport, Transport):
            raise TransportCreationError(self.__class__.__name__, transport)

        self.logger.info(f"Delivering with {transport.__class__.__name__}")
        transport.perform()
        return transport
