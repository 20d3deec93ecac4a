"""Helpers for cleaning up child processes."""

import logging

import psutil

logger = logging.getLogger(__name__)


def terminate_process_tree(pid: int, timeout: float = 5.0) -> None:
    """Terminate a process and all of its descendants.

    Processes still alive after ``timeout`` seconds are killed.
    """
    try:
        parent = psutil.Process(pid)
    except psutil.NoSuchProcess:
        return

    try:
        procs = parent.children(recursive=True)
    except psutil.NoSuchProcess:
        procs = []
    procs.append(parent)

    for proc in procs:
        try:
            logger.debug("Terminating process %d", proc.pid)
            proc.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(procs, timeout=timeout)
    for proc in alive:
        try:
            logger.warning("Killing process %d", proc.pid)
            proc.kill()
        except psutil.NoSuchProcess:
            pass
