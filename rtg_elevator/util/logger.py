import sys

from loguru import logger

PALETTE = {
    "bfs_solver": "green",
    "report": "blue",
    "cli": "magenta",
}

LEVEL_PER_COMPONENT = {
    "bfs_solver": "INFO",
    "report": "WARNING",
    "cli": "INFO",
}


def set_component_level(component: str, level: str) -> None:
    """Change the minimum level shown for one component."""
    LEVEL_PER_COMPONENT[component] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    part = record["extra"].get("part", "")
    colour = PALETTE.get(comp, "white")

    # The tag lives in the *template* that the sink receives,
    # so Loguru will translate it to ANSI codes.
    if part:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10} | part {part:<3}</> | "
            "<level>{message}</level>\n"
        )
    else:
        return (
            "{time:HH:mm:ss} | "
            f"<{colour}>{comp:<10}</> | "
            "<level>{message}</level>\n"
        )


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
