# processor.py
from playwright.async_api import Error as PlaywrightError

from helpers_rows import locate_control, is_checked
from mappings import ANTISPAM_URL, TARGET_LABEL_RE, INNER_CHECK_SELECTOR
from utils import RowSelectError, PollTimeout, open_list_page

MAX_WAIT_MS = 5000
POLL_INTERVAL_MS = 100
SCROLL_SETTLE_MS = 500


async def _click_control(page, control, verbose=True):
    await control.scroll_into_view_if_needed()
    await page.wait_for_timeout(SCROLL_SETTLE_MS)

    if verbose: print("[click] row check")
    await control.click()

    # Fluent UI nests the clickable circle; the outer click alone is not always registered
    try:
        inner = await control.query_selector(INNER_CHECK_SELECTOR)
        if inner:
            if verbose: print(f"[click] inner {INNER_CHECK_SELECTOR}")
            await inner.click()
    except Exception as e:
        print(f"[warn] inner check click skipped: {e}")


async def wait_until_checked(page, relocate, max_wait_ms=MAX_WAIT_MS,
                             interval_ms=POLL_INTERVAL_MS, verbose=True, debug=False):
    """
    Poll until the row check reports aria-checked="true".

    The control is looked up again on every tick since the list may re-render
    the row. Returns (control, waited_ms); raises PollTimeout once waited_ms
    reaches max_wait_ms.
    """
    if interval_ms <= 0:
        raise ValueError(f"poll interval must be positive, got {interval_ms}ms")

    if verbose: print(f"[wait] aria-checked=true (max {max_wait_ms}ms, every {interval_ms}ms)")
    waited = 0
    while waited < max_wait_ms:
        try:
            current = await relocate()
            if await is_checked(current):
                if verbose: print(f"[done] row check selected after {waited}ms")
                return current, waited
        except (RowSelectError, PlaywrightError) as e:
            # row is mid re-render or its handle detached; treat as not checked yet
            if debug: print(f"[debug] tick {waited}ms: {e}")

        await page.wait_for_timeout(interval_ms)
        waited += interval_ms

    raise PollTimeout(f"row check not selected within {max_wait_ms}ms", waited_ms=waited)


async def ensure_checked(page, control, relocate=None, max_wait_ms=MAX_WAIT_MS,
                         interval_ms=POLL_INTERVAL_MS, verbose=True, debug=False):
    if relocate is None:
        relocate = lambda: locate_control(page, TARGET_LABEL_RE, debug=debug)

    state = await control.get_attribute("aria-checked")
    if verbose: print(f'[seek] current state aria-checked="{state}"')
    if state == "true":
        if verbose: print("[done] already selected, nothing to click")
        return {"already_checked": True, "waited_ms": 0}

    await _click_control(page, control, verbose=verbose)
    current, waited = await wait_until_checked(
        page, relocate, max_wait_ms=max_wait_ms, interval_ms=interval_ms,
        verbose=verbose, debug=debug,
    )

    final = await current.get_attribute("aria-checked")
    if verbose: print(f'[done] final aria-checked="{final}"')
    if final != "true":
        raise PollTimeout(f'final check read aria-checked="{final}"', waited_ms=waited)
    return {"already_checked": False, "waited_ms": waited}


async def select_row(page, url=ANTISPAM_URL, pattern=TARGET_LABEL_RE,
                     max_wait_ms=MAX_WAIT_MS, interval_ms=POLL_INTERVAL_MS,
                     verbose=True, debug=False):
    await open_list_page(page, url, verbose=verbose)

    if verbose: print("[seek] connection filter policy row")
    control = await locate_control(page, pattern, verbose=verbose, debug=debug)
    if verbose: print("[hit ] row check control")

    return await ensure_checked(
        page, control,
        relocate=lambda: locate_control(page, pattern, debug=debug),
        max_wait_ms=max_wait_ms, interval_ms=interval_ms,
        verbose=verbose, debug=debug,
    )
