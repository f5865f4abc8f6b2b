# row_diagnostics.py
import asyncio
from playwright.async_api import async_playwright

from helpers_rows import (
    norm, label_texts, find_matching_rows, first_hit, probe_container, probe_control
)
from mappings import (
    ANTISPAM_URL, TARGET_LABEL_RE, CONTAINER_STRATEGIES, CONTROL_STRATEGIES
)

async def describe_rows(page, pattern=TARGET_LABEL_RE):
    """
    One dict per label row: text, whether it matches, which strategies
    resolved its container and control, and the control's aria-checked.
    """
    rows = []
    for el, text in await label_texts(page):
        info = {
            "text": norm(text),
            "match": bool(pattern.search(text)),
            "container": None,
            "control": None,
            "aria_checked": None,
        }
        c_strategy, container = await first_hit(CONTAINER_STRATEGIES, lambda s: probe_container(el, s))
        if container is not None:
            info["container"] = c_strategy["name"]
            k_strategy, control = await first_hit(CONTROL_STRATEGIES, lambda s: probe_control(container, s))
            if control is not None:
                info["control"] = k_strategy["name"]
                info["aria_checked"] = await control.get_attribute("aria-checked")
        rows.append(info)
    return rows

async def print_row_details(page, pattern=TARGET_LABEL_RE):
    rows = await describe_rows(page, pattern)
    print("\n--- Policy Row Diagnostics ---")
    if not rows:
        print("No label rows found on this page.")
        return rows
    for idx, r in enumerate(rows):
        mark = "*" if r["match"] else " "
        print(f"{mark}[{idx}] {r['text'][:120]}")
        print(f"    container: {r['container'] or '(none)'}  control: {r['control'] or '(none)'}  aria-checked: {r['aria_checked']}")
    hits = len(await find_matching_rows(page, pattern))
    if hits == 0:
        print("[warn] no row matches the target pattern.")
    elif hits > 1:
        print(f"[warn] {hits} rows match the target pattern; the selector takes the first.")
    print("--- End Diagnostics ---\n")
    return rows

async def main():
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=False)
        page = await browser.new_page()
        await page.goto(ANTISPAM_URL, wait_until="networkidle", timeout=30000)
        print("Sign in and open the policy list. Press Enter to print row details. Press Ctrl+C to exit.")
        try:
            while True:
                input("\nPress Enter to print row details for this page...")
                await print_row_details(page)
        except KeyboardInterrupt:
            print("Exiting...")
        await browser.close()

if __name__ == "__main__":
    asyncio.run(main())
