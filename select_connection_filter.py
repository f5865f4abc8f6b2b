# select_connection_filter.py
import asyncio
import sys

from playwright.async_api import async_playwright

from mappings import ANTISPAM_URL, SUCCESS_SHOT, ERROR_SHOT
from processor import select_row, MAX_WAIT_MS, POLL_INTERVAL_MS
from utils import save_shot

HEADLESS = False
SLOW_MO_MS = 500


async def run_on_page(page, url=ANTISPAM_URL, max_wait_ms=MAX_WAIT_MS,
                      interval_ms=POLL_INTERVAL_MS, shots_dir=".", debug=False) -> int:
    try:
        result = await select_row(
            page, url=url,
            max_wait_ms=max_wait_ms, interval_ms=interval_ms,
            verbose=True, debug=debug,
        )
        if result["already_checked"]:
            print("[done] connection filter policy was already selected.")
        else:
            print(f"[done] connection filter policy selected ({result['waited_ms']}ms).")
        await save_shot(page, shots_dir, SUCCESS_SHOT)
        return 0
    except Exception as e:
        print(f"[error] {type(e).__name__}: {e}")
        try:
            await save_shot(page, shots_dir, ERROR_SHOT, full_page=True)
        except Exception as shot_err:
            print(f"[warn] error screenshot failed: {shot_err}")
        return 1
    finally:
        print("[end] run finished.")


async def run() -> int:
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=HEADLESS, slow_mo=SLOW_MO_MS)
        ctx = await browser.new_context()
        page = await ctx.new_page()
        try:
            return await run_on_page(page)
        finally:
            await ctx.close()
            await browser.close()


def main():
    try:
        code = asyncio.run(run())
    except KeyboardInterrupt:
        print("\n[cancelled]")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
