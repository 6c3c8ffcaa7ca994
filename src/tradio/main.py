"""
tradio - startup and the interactive menu loop
"""

import signal
from typing import Optional

from loguru import logger

from tradio import router, ui
from tradio.context import AppContext
from tradio.core.config import apply_env_overrides, load_env_file
from tradio.core.output import get_log_file_path, log, setup_loguru
from tradio.core.store import Store


def bootstrap(store: Optional[Store] = None) -> AppContext:
    """Load configuration, initialize logging and build the app context."""
    load_env_file()
    # Default sink first so config warnings reach the log file
    setup_loguru(get_log_file_path())
    store = store or Store()
    config = apply_env_overrides(store.load_config())
    setup_loguru(get_log_file_path(config.logging), level=config.logging.level)
    logger.debug(f"Config dir: {store.base_dir}")
    return AppContext.create(store=store, config=config)


def _exit_on_sigterm(signum, frame) -> None:
    raise SystemExit(0)


def cleanup(ctx: AppContext) -> None:
    """Stop playback when leaving the menu."""
    if ctx.session.is_playing():
        log("Stopping radio...", level="warning")
    ctx.session.stop()
    log("\nExiting...", level="success")


def interactive_mode(ctx: AppContext) -> None:
    """Run the menu until the user quits; playback stops on the way out."""
    previous_handler = signal.signal(signal.SIGTERM, _exit_on_sigterm)
    try:
        while True:
            ui.render_menu(ctx)
            choice = ui.ask(ctx, "\nYour choice")
            ctx, should_continue = router.handle_command(ctx, choice)
            if not should_continue:
                break
    except (KeyboardInterrupt, EOFError):
        ctx.console.print()
    finally:
        cleanup(ctx)
        signal.signal(signal.SIGTERM, previous_handler)
