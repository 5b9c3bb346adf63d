import logging
import subprocess
import sys
from typing import List

logger = logging.getLogger("userbench")


def run_with_reload(argv: List[str], watch_path: str = ".") -> None:
    """
    Run the userbench server in a child process and restart it whenever a
    Python file under ``watch_path`` changes. ``argv`` holds the CLI flags
    for the child, without ``--reload``.
    """
    try:
        import watchfiles
    except ImportError:
        raise ImportError("Hot reload requires watchfiles: pip install userbench[reload]") from None

    cmd = [sys.executable, "-m", "userbench", *argv]
    proc = None

    def start():
        nonlocal proc
        if proc:
            proc.terminate()
            proc.wait()
        proc = subprocess.Popen(cmd)

    logger.info("hot reload enabled, watching *.py files under %s", watch_path)
    start()
    try:
        for changes in watchfiles.watch(watch_path, watch_filter=watchfiles.PythonFilter()):
            logger.info("%d change(s) detected, reloading", len(changes))
            start()
    except KeyboardInterrupt:
        pass
    finally:
        if proc:
            proc.terminate()
            proc.wait()
