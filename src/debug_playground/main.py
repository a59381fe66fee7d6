"""Main program entry point."""

import logging

from debug_playground import __version__
from debug_playground.config import settings
from debug_playground.core.program import run
from debug_playground.utils.console import Console

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run the debug playground."""
    logger.info(f"Debug playground v{__version__}")
    logger.debug(f"Step delay: {settings.step_delay_seconds}s, seed: {settings.random_seed}")

    console = Console()
    run(settings, console=console)


if __name__ == "__main__":
    main()
