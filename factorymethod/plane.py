"""
Plane transport and the factory that builds it.
"""

from .base import Transport, TransportFactory


class Plane(Transport):
    message = "Plane is flying..."

    def perform(self) -> None:
        print(self.message)


class PlaneFactory(TransportFactory):
    def create(self) -> Transport:
        self.logger.debug("Creating Plane")
        return Plane()
