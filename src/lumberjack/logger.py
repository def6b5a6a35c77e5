import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "forest": "blue",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "solver": "INFO",
    "forest": "WARNING",
}


def set_component_level(component: str, level: str) -> None:
    """Set the minimum level emitted for records bound to ``component``."""
    # Validates the level name, raises ValueError for unknown levels
    logger.level(level)
    LEVEL_PER_COMPONENT[component] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    # Colour markup goes in the returned template for loguru to render
    return (
        "{time:HH:mm:ss.SSS} | "
        f"<{colour}>{comp:<7}</> | "
        "<level>{level: <7}</level> | "
        "<level>{message}</level>\n"
    )


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
