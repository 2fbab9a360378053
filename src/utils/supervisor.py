"""Process-wide handling of exceptions nobody else caught.

Outside production the process exits after logging so a crash is loud
during development. In production the error is logged and the process
keeps serving.
"""

import asyncio
import logging
import os
import sys
import threading

logger = logging.getLogger(__name__)


def _terminate() -> None:
    logging.shutdown()
    os._exit(1)


def install_exception_hooks(environment: str) -> None:
    """Install sys/threading hooks that log uncaught exceptions.

    Args:
        environment: Value of APP_ENV. Anything but "production" terminates
            the process after logging.
    """
    exit_on_error = environment.lower() != "production"

    def _excepthook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        if exit_on_error:
            _terminate()

    def _thread_excepthook(args: threading.ExceptHookArgs):
        if args.exc_type is SystemExit:
            return
        logger.critical(
            "Uncaught exception in thread",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
            extra={"thread_name": args.thread.name if args.thread else None},
        )
        if exit_on_error:
            _terminate()

    sys.excepthook = _excepthook
    threading.excepthook = _thread_excepthook


def install_loop_exception_handler(loop: asyncio.AbstractEventLoop) -> None:
    """Log exceptions from tasks whose result was never retrieved.

    These are logged only; the loop keeps running in every environment.
    """
    def _handler(loop: asyncio.AbstractEventLoop, context: dict):
        exc = context.get("exception")
        logger.error(
            "Unhandled exception in event loop: %s", context.get("message", ""),
            exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
        )

    loop.set_exception_handler(_handler)
