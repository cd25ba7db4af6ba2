from django.conf import settings

from sccscope.types import Algorithm

DEFAULT_PALETTE = [
    "red",
    "green",
    "blue",
    "yellow",
    "dark_orange",
    "purple",
    "cyan",
    "magenta",
    "orange4",
    "white",
]


def get_palette() -> list[str]:
    palette = list(getattr(settings, "SCCSCOPE_PALETTE", DEFAULT_PALETTE))
    if not palette:
        raise ValueError("SCCSCOPE_PALETTE must contain at least one colour.")
    return palette


def get_default_algorithm() -> Algorithm:
    return Algorithm.parse(
        getattr(settings, "SCCSCOPE_DEFAULT_ALGORITHM", Algorithm.KOSARAJU)
    )


def get_graph_payloads() -> list[dict] | None:
    """
    Returns the graphs configured in ``SCCSCOPE_GRAPHS``, or ``None`` when the
    built-in demo graphs should be used.
    """
    payloads = getattr(settings, "SCCSCOPE_GRAPHS", None)
    if payloads is None:
        return None
    return list(payloads)
