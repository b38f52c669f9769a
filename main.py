import logging
from typing import Optional

import typer

from library_system.config import settings
from library_system.library import Library
from library_system.shell import LibraryShell

APP_NAME = settings.app_name

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # Loglar stderr'e gider; stdout menü metni için temiz kalır
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_menu(library: Optional[Library] = None) -> None:
    """Kütüphane için etkileşimli menü döngüsünü çalıştırır."""
    shell = LibraryShell(library)
    logger.info(f"{APP_NAME} {settings.app_version} started")
    shell.run()
    logger.info(f"{APP_NAME} stopped with {len(shell.library)} book(s) in memory")


# --- Typer CLI Uygulaması ---
app = typer.Typer(help=APP_NAME, add_completion=False)


@app.command()
def cli_run():
    """Start the interactive library menu."""
    _configure_logging()
    run_menu()


if __name__ == "__main__":
    app()
