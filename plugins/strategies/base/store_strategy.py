from abc import ABC, abstractmethod


class StoreStrategy(ABC):
    @abstractmethod
    def store(self, **kwargs):
        pass
