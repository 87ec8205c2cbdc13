"""Main application entry point."""
import logging
import tkinter as tk
from queue import Queue

from uking_mod_manager.core import CatalogError, HttpCatalogAPI, ModStateController, OfflineCatalogAPI
from uking_mod_manager.ui.main_window import MainWindow
from uking_mod_manager.utils import Config, check_host_status, setup_logger


def enable_dpi_awareness() -> None:
    """Enable DPI awareness for crisp text rendering on Windows."""
    try:
        import ctypes
        ctypes.windll.shcore.SetProcessDpiAwareness(2)  # 2 = PROCESS_PER_MONITOR_DPI_AWARE
    except (AttributeError, OSError):
        try:
            import ctypes
            ctypes.windll.user32.SetProcessDPIAware()
        except (AttributeError, OSError):
            pass  # Not on Windows or API unavailable


def build_controller(config: Config, logger: logging.Logger) -> ModStateController:
    """Connect to the mod manager host, or fall back to an empty offline catalog."""
    api_url = config.get("api_url")
    online, status = check_host_status(api_url, timeout=float(config.get("request_timeout", 10)))
    if online:
        try:
            return ModStateController(HttpCatalogAPI(api_url, timeout=float(config.get("request_timeout", 10))))
        except CatalogError as e:
            logger.error(f"Could not load catalog from {api_url}: {e}")
    else:
        logger.error(f"{status} ({api_url})")
    logger.warning("Starting with an empty offline catalog")
    return ModStateController(OfflineCatalogAPI())


def main() -> None:
    """Main application entry point."""
    enable_dpi_awareness()

    config = Config()
    level = logging.getLevelName(str(config.get("log_level", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    # Queue feeding the activity log pane
    log_queue: Queue = Queue()
    logger = setup_logger(
        "uking_mod_manager",
        level=level,
        log_queue=log_queue,
        log_file=config.log_dir / "app.log",
        redirect_stdout=True,
    )
    logger.info("Started U-King Mod Manager")

    controller = build_controller(config, logger)

    root = tk.Tk()
    try:
        app = MainWindow(root, controller, config, log_queue)
        app.run()
    except Exception as e:
        logger.error(f"Application error: {e}", exc_info=True)
        raise
    finally:
        logger.info("Application closed")


if __name__ == "__main__":
    main()
