import logging
import sys


class _ThirdPartyFilter(logging.Filter):
    """Garde les logs todo_api et uvicorn ; les autres bibliothèques seulement à partir de WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(("todo_api", "uvicorn")):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure le logger racine (console uniquement).
    À appeler UNE fois, au démarrage du process.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # évite les doublons si appelée deux fois
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
