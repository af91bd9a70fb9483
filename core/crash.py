"""Deliberate crash triggers used to exercise crash reporting"""
import ctypes
import logging
import multiprocessing
from collections import OrderedDict

from config.settings import Settings

logger = logging.getLogger(__name__)


class DeliberateCrash(RuntimeError):
    """Raised on purpose to bring the application down through the exception hook"""


def crash_native(address: int = Settings.NATIVE_CRASH_ADDRESS):
    """Read from a near-NULL address so the process dies with a segfault"""
    logger.warning(f"[Crash] Native crash requested (reading 0x{address:x})")
    ctypes.string_at(address, 1)


def crash_exception():
    """Raise an unhandled error out of the current event handler"""
    logger.warning("[Crash] Unhandled exception crash requested")
    raise DeliberateCrash("Crash me! (unhandled exception)")


def _content_worker(address: int):
    ctypes.string_at(address, 1)


def crash_content(address: int = Settings.NATIVE_CRASH_ADDRESS) -> multiprocessing.Process:
    """
    Crash a separate worker process, leaving this one running.
    Workers from earlier calls are reaped first, so at most the latest
    one can linger as a defunct child.

    Returns:
        The started worker; its exitcode is negative once the crash happened
    """
    logger.warning("[Crash] Content process crash requested")
    # Joins workers from earlier clicks that have already died
    running = multiprocessing.active_children()
    if running:
        logger.debug(f"[Crash] {len(running)} earlier content worker(s) still running")
    worker = multiprocessing.Process(target=_content_worker, args=(address,), name="crashme-content", daemon=True)
    worker.start()
    logger.info(f"[Crash] Started content worker pid={worker.pid}")
    return worker


# action id -> (label, tooltip, callable)
CRASH_ACTIONS = OrderedDict([
    ("native", ("Crash me!", "Crash your application", crash_native)),
    ("exception", ("Crash me (exception)!", "Crash through an unhandled exception", crash_exception)),
    ("content", ("Crash content process!", "Crash the content process", crash_content)),
])
