import pytest

import select_connection_filter
from fakes import PolicyRow, policy_page
from mappings import SUCCESS_SHOT, ERROR_SHOT
from select_connection_filter import main, run_on_page

TARGET = "Bağlantı filtresi ilkesi (Varsayılan)"


def test_main_ignores_command_line_and_exits_with_run_code(monkeypatch):
    seen = {}

    async def fake_run(*args, **kwargs):
        seen["args"] = (args, kwargs)
        return 1

    monkeypatch.setattr(select_connection_filter, "run", fake_run)
    monkeypatch.setattr("sys.argv", ["select_connection_filter.py", "--interval", "0", "--headless"])

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code == 1
    assert seen["args"] == ((), {})


def test_main_exits_zero_on_success(monkeypatch):
    async def fake_run():
        return 0

    monkeypatch.setattr(select_connection_filter, "run", fake_run)

    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 0


@pytest.mark.asyncio
async def test_success_returns_zero_and_saves_viewport_shot(capsys):
    page = policy_page([PolicyRow(TARGET, flip_after_ms=300)])

    code = await run_on_page(page)

    assert code == 0
    assert page.shots == [(SUCCESS_SHOT, False)]
    assert "connection filter policy selected" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_already_selected_still_succeeds():
    page = policy_page([PolicyRow(TARGET, checked=True)])

    assert await run_on_page(page) == 0
    assert page.clicks == []


@pytest.mark.asyncio
async def test_no_matching_row_fails_without_clicking(capsys):
    page = policy_page([PolicyRow("Outbound spam filter policy (Default)")])

    code = await run_on_page(page)

    assert code == 1
    assert page.clicks == []
    assert page.shots == [(ERROR_SHOT, True)]
    assert "[error] RowNotFound" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_timeout_fails_with_error_shot(capsys):
    page = policy_page([PolicyRow(TARGET, flip_after_ms=None)])

    code = await run_on_page(page, max_wait_ms=500)

    assert code == 1
    assert page.shots == [(ERROR_SHOT, True)]
    assert "[error] PollTimeout" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_zero_interval_fails_instead_of_spinning(capsys):
    page = policy_page([PolicyRow(TARGET, flip_after_ms=None)])

    code = await run_on_page(page, interval_ms=0)

    assert code == 1
    assert "[error] ValueError" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_failed_error_shot_does_not_mask_failure(capsys):
    page = policy_page([])

    async def broken_screenshot(path, full_page=False):
        raise RuntimeError("target closed")

    page.screenshot = broken_screenshot

    code = await run_on_page(page)

    out = capsys.readouterr().out
    assert code == 1
    assert "[error] RowNotFound" in out
    assert "[warn] error screenshot failed" in out


@pytest.mark.asyncio
async def test_shots_dir_is_used(tmp_path):
    page = policy_page([PolicyRow(TARGET, checked=True)])

    await run_on_page(page, shots_dir=str(tmp_path))

    assert page.shots == [(str(tmp_path / SUCCESS_SHOT), False)]
