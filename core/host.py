"""
Host window services consumed by the watcher and the unload registry.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

WindowListener = Callable[[object], None]
DestroyListener = Callable[[], None]


class WindowHost(ABC):
    """Window enumeration and lifecycle notifications"""

    @abstractmethod
    def enumerate_windows(self) -> List[object]:
        pass

    @abstractmethod
    def window_category(self, window) -> Optional[str]:
        pass

    @abstractmethod
    def is_loaded(self, window) -> bool:
        pass

    @abstractmethod
    def add_load_listener(self, window, listener: WindowListener) -> None:
        pass

    @abstractmethod
    def remove_load_listener(self, window, listener: WindowListener) -> None:
        pass

    @abstractmethod
    def add_open_listener(self, listener: WindowListener) -> None:
        pass

    @abstractmethod
    def remove_open_listener(self, listener: WindowListener) -> None:
        pass

    @abstractmethod
    def add_destroy_listener(self, container, listener: DestroyListener) -> None:
        pass

    @abstractmethod
    def remove_destroy_listener(self, container, listener: DestroyListener) -> None:
        pass
