"""Contains logging configuration data."""
import sys

# Logger printing formats
DEFAULT_FORMAT = "<level>{level}</level>: {message}"
DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}:{line}</cyan> | "
    "{message}"
)


def setup_logging(
    filename=None,
    level="DEBUG",
    verbose=False,
) -> None:
    """Configures logging to file and console.

    Parameters
    ----------
    filename : str | None
        log filename
    level : str, optional
        change default level of logging.
    verbose :  bool
        use the detailed format with timestamps and source lines.
    """
    from loguru import logger

    logger.remove()
    logger.enable("geosites")
    fmt = DEBUG_FORMAT if verbose else DEFAULT_FORMAT
    logger.add(sys.stderr, level=level, format=fmt)
    if filename:
        logger.add(filename, level=level)


if __name__ == "__main__":
    from geosites import Location

    setup_logging(level="DEBUG")
    loc = Location.create_from_line("Paris\tIle-de-France\tfr\tB\t2138.5\t48.856600N\t2.352200E\t35")
    loc.pprint()
