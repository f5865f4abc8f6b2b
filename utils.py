# utils.py
from pathlib import Path

from playwright.async_api import TimeoutError as PlaywrightTimeout

from mappings import LABEL_SELECTOR


class RowSelectError(Exception):
    """Base for every failure of a row selection run."""


class RowNotFound(RowSelectError):
    pass


class ContainerNotFound(RowSelectError):
    pass


class ControlNotFound(RowSelectError):
    pass


class PollTimeout(RowSelectError):
    def __init__(self, message, waited_ms=0):
        super().__init__(message)
        self.waited_ms = waited_ms


async def open_list_page(page, url, settle_ms=2000, verbose=True):
    """
    Go to the policy list and wait until the first label row is visible.
    A list that never renders is reported as RowNotFound.
    """
    if verbose: print(f"[nav] {url}")
    await page.goto(url, wait_until="networkidle", timeout=30000)
    await page.wait_for_timeout(settle_ms)

    if verbose: print(f"[seek] first label row ({LABEL_SELECTOR})")
    try:
        await page.wait_for_selector(LABEL_SELECTOR, state="visible", timeout=10000)
    except PlaywrightTimeout:
        raise RowNotFound(f"no label row ({LABEL_SELECTOR}) became visible on {url}")
    if verbose: print("[hit ] label rows rendered")


async def save_shot(page, shots_dir, name, full_page=False):
    path = Path(shots_dir or ".") / name
    await page.screenshot(path=str(path), full_page=full_page)
    print(f"[shot] {path}")
    return path
