# helpers_rows.py
import re

from mappings import (
    LABEL_SELECTOR, TARGET_LABEL_RE, CONTAINER_STRATEGIES, CONTROL_STRATEGIES
)
from utils import RowNotFound, ContainerNotFound, ControlNotFound


def norm(s: str) -> str:
    return re.sub(r"\s+", " ", (s or "")).strip()


async def label_texts(page):
    """All label elements in document order, paired with their text."""
    out = []
    for el in await page.query_selector_all(LABEL_SELECTOR):
        out.append((el, await el.text_content() or ""))
    return out


async def find_matching_rows(page, pattern=TARGET_LABEL_RE):
    return [(el, text) for el, text in await label_texts(page) if pattern.search(text)]


async def find_target_row(page, pattern=TARGET_LABEL_RE, verbose=False):
    """
    Returns the first label (document order) whose text matches pattern.
    Later matches are never looked at.
    """
    for el in await page.query_selector_all(LABEL_SELECTOR):
        text = await el.text_content()
        if text and pattern.search(text):
            if verbose: print(f'[hit ] target row: "{norm(text)}"')
            return el
    raise RowNotFound(f"no row label matches /{pattern.pattern}/")


async def first_hit(strategies, probe):
    """
    Probe each strategy in order and stop at the first that yields an element.
    Returns (strategy, element) or (None, None).
    """
    for strategy in strategies:
        el = await probe(strategy)
        if el is not None:
            return strategy, el
    return None, None


async def probe_container(row, strategy):
    handle = await row.evaluate_handle(strategy["js"])
    return handle.as_element()


async def probe_control(container, strategy):
    return await container.query_selector(strategy["css"])


async def resolve_container(row, strategies=CONTAINER_STRATEGIES, debug=False):
    strategy, container = await first_hit(strategies, lambda s: probe_container(row, s))
    if container is None:
        raise ContainerNotFound("row label has no recognizable row container")
    if debug: print(f"[debug] container via {strategy['name']}")
    return container


async def resolve_control(container, strategies=CONTROL_STRATEGIES, debug=False):
    strategy, control = await first_hit(strategies, lambda s: probe_control(container, s))
    if control is None:
        raise ControlNotFound("row container holds no row check control")
    if debug: print(f"[debug] control via {strategy['name']}")
    return control


async def locate_control(page, pattern=TARGET_LABEL_RE, verbose=False, debug=False):
    """Row label -> container -> control, from scratch every call."""
    row = await find_target_row(page, pattern, verbose=verbose)
    container = await resolve_container(row, debug=debug)
    return await resolve_control(container, debug=debug)


async def is_checked(control) -> bool:
    return await control.get_attribute("aria-checked") == "true"
