from __future__ import annotations

import logging
import sys
import threading
import traceback
from collections.abc import Callable


def install_error_boundary(notify: Callable[[str], None] | None = None) -> None:
    """Install global exception hooks.

    Unhandled exceptions in the main thread, Qt slots and background threads
    are logged instead of disappearing, and ``notify`` (if given) receives a
    short user-facing message.
    """

    log = logging.getLogger(__name__)

    def _handle(exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
            if notify is not None:
                notify(f"Unexpected error: {exc}. See the log for details.")
        finally:
            # Keep default behavior in console
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
