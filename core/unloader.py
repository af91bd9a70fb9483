"""
Unload registry for scoped cleanup callbacks.
Keeps an ordered list of unloaders, optionally tied to a container's lifetime.
"""
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class UnloadRegistry:
    """Ordered collection of cleanup callbacks run on teardown"""

    def __init__(self, host=None):
        """
        Initialize unload registry

        Args:
            host: WindowHost used to listen for container destruction.
                  Only required for container-scoped unloaders.
        """
        self.host = host
        self._unloaders: List[Callable[[], None]] = []

    def init(self):
        """Reset to an empty registry without running anything"""
        self._unloaders = []

    def __len__(self) -> int:
        return len(self._unloaders)

    def register(self, callback: Callable[[], None], container: Optional[object] = None) -> Callable[[], None]:
        """
        Add a callback to run on unload

        Args:
            callback: 0-parameter function to call on unload
            container: Run the callback early and forget it when this container is destroyed

        Returns:
            A 0-parameter function that removes the callback again. Calling it
            more than once is harmless.
        """
        name = _describe(callback)

        def remove_unloader() -> bool:
            if unloader in self._unloaders:
                self._unloaders.remove(unloader)
                return True
            return False

        if container is None:
            def unloader():
                _run_quietly(callback, name)

            self._unloaders.append(unloader)
            return remove_unloader

        if self.host is None:
            raise ValueError("Container-scoped unloaders need a host")

        host = self.host

        def scoped_callback():
            host.remove_destroy_listener(container, on_destroyed)
            callback()

        def unloader():
            _run_quietly(scoped_callback, name)

        def on_destroyed():
            # Entry leaves the registry first so run_all() can never see it again
            if remove_unloader():
                logger.debug(f"[Unload] Container destroyed, running {name}")
                unloader()

        def remove_scoped():
            remove_unloader()
            host.remove_destroy_listener(container, on_destroyed)

        host.add_destroy_listener(container, on_destroyed)
        self._unloaders.append(unloader)
        return remove_scoped

    def run_all(self):
        """Run all the unloader callbacks and release them"""
        snapshot = list(self._unloaders)
        if snapshot:
            logger.info(f"[Unload] Running {len(snapshot)} unloader(s)")
        for unloader in snapshot:
            # Skip entries an earlier unloader removed during this pass
            if unloader not in self._unloaders:
                continue
            self._unloaders.remove(unloader)
            unloader()
        self._unloaders.clear()


def _describe(callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


def _run_quietly(callback, name: str):
    try:
        callback()
    except Exception:
        logger.exception(f"[Unload] Unloader {name} failed")


# Simple singleton implementation
class UnloadRegistrySingleton:
    _instance = None

    @staticmethod
    def get_instance():
        """Get the global unload registry instance"""
        if UnloadRegistrySingleton._instance is None:
            UnloadRegistrySingleton._instance = UnloadRegistry()
        return UnloadRegistrySingleton._instance


# Global accessor
unload_registry = UnloadRegistrySingleton.get_instance
