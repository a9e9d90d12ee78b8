from abc import ABC, abstractmethod


class ConnectivityProbe(ABC):
    """Authoritative "is the network reachable" signal."""

    @abstractmethod
    def is_connected(self) -> bool:
        ...


class StaticConnectivityProbe(ConnectivityProbe):
    def __init__(self, connected: bool = True):
        self.connected = connected

    def is_connected(self) -> bool:
        return self.connected
