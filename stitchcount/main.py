"""Composition root for the stitch counter.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Entry point selection (web or terminal)
"""

import asyncio
import logging
import sys

from stitchcount.adapters.cli.terminal import TerminalSession
from stitchcount.adapters.clock import SystemClock
from stitchcount.adapters.display.stdout import StdoutDisplayAdapter
from stitchcount.adapters.display.web import WebDisplayAdapter
from stitchcount.adapters.feedback.terminal import TerminalFeedbackAdapter
from stitchcount.adapters.feedback.web import WebFeedbackAdapter
from stitchcount.adapters.input import select_input_adapter
from stitchcount.adapters.store.json_file import JsonFileStateStore
from stitchcount.adapters.store.sqlite import SQLiteStateStore
from stitchcount.adapters.web.http_server import TallyHTTPServer
from stitchcount.adapters.web.receiver import WebReceiver
from stitchcount.config import Settings, load_settings
from stitchcount.core.controller import TallyController
from stitchcount.core.counter_store import CounterStore
from stitchcount.core.gesture import GestureClassifier
from stitchcount.core.ports import PersistencePort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_store(settings: Settings) -> PersistencePort:
    """Instantiate the configured state store."""
    if settings.store_backend == "sqlite":
        return SQLiteStateStore(
            db_path=settings.store_sqlite_path,
            key=settings.storage_key,
        )
    if settings.store_backend == "json_file":
        return JsonFileStateStore(
            path=settings.store_json_path,
            key=settings.storage_key,
        )
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


async def run_web(settings: Settings, persistence: PersistencePort) -> None:
    """Serve the counter page until cancelled."""
    logger = logging.getLogger(__name__)
    clock = SystemClock()
    display = WebDisplayAdapter()
    feedback = WebFeedbackAdapter(duration_ms=settings.flash_duration_ms)

    # Pointer input until the page reports its capabilities.
    controller = TallyController(
        store=CounterStore(persistence, display),
        classifier=GestureClassifier(settings.gesture_thresholds()),
        input_adapter=select_input_adapter(settings.input_mode, False, clock),
        feedback=feedback,
    )
    await controller.start()

    receiver = WebReceiver(
        controller=controller,
        display=display,
        feedback=feedback,
        clock=clock,
        input_mode=settings.input_mode,
    )
    http_server = TallyHTTPServer(
        receiver=receiver,
        host=settings.web_host,
        port=settings.web_port,
    )
    await http_server.start()

    try:
        while True:
            await asyncio.sleep(1)
    finally:
        logger.info("Stopping web surface")
        await http_server.stop()


async def run_cli(settings: Settings, persistence: PersistencePort) -> None:
    """Run the interactive terminal session until exit."""
    clock = SystemClock()
    controller = TallyController(
        store=CounterStore(persistence, StdoutDisplayAdapter()),
        classifier=GestureClassifier(settings.gesture_thresholds()),
        input_adapter=select_input_adapter("pointer", False, clock),
        feedback=TerminalFeedbackAdapter(duration_ms=settings.flash_duration_ms),
    )
    await controller.start()
    await TerminalSession(controller).run()


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Raises:
        SystemExit: On fatal configuration errors.
        asyncio.CancelledError: On graceful shutdown signal.
    """
    settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading stitch counter...")

    try:
        persistence = build_store(settings)
    except (ValueError, OSError) as e:
        logger.error(f"Could not open state store: {e}")
        sys.exit(1)
    logger.info(f"State store: {settings.store_backend}")

    logger.info(f"Starting in {settings.run_mode} mode...")
    try:
        if settings.run_mode == "web":
            await run_web(settings, persistence)
        elif settings.run_mode == "cli":
            await run_cli(settings, persistence)
        else:
            logger.error(f"Unknown run mode: {settings.run_mode}")
            sys.exit(1)
    finally:
        await persistence.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except asyncio.CancelledError:
        logger.info("Graceful shutdown completed")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
