"""Tests for the admin CLI."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from webrtc_presence.adapters.memory import InMemoryPresenceStore
from webrtc_presence.cli import build_parser, main, run_command


async def _populated_store() -> InMemoryPresenceStore:
    store = InMemoryPresenceStore()
    await store.add_peer("A")
    await store.add_peer("B")
    await store.set_broadcast("A", True)
    return store


def test_broadcast_requires_on_or_off() -> None:
    """Given the broadcast command without a toggle, when parsing, then argparse exits."""
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["broadcast", "A"])


def test_broadcast_toggle_parsing() -> None:
    """Given --on or --off, when parsing, then enabled is set accordingly."""
    parser = build_parser()

    assert parser.parse_args(["broadcast", "A", "--on"]).enabled is True
    assert parser.parse_args(["broadcast", "A", "--off"]).enabled is False


@pytest.mark.asyncio
async def test_state_prints_peers_with_broadcast_marker(capsys: pytest.CaptureFixture[str]) -> None:
    """Given two peers with one broadcasting, when showing state, then the broadcaster is marked."""
    store = await _populated_store()
    args = build_parser().parse_args(["state"])

    await run_command(store, args)

    out = capsys.readouterr().out
    assert "Peers (2):" in out
    assert "A [broadcasting]" in out
    assert "  B\n" in out


@pytest.mark.asyncio
async def test_state_reports_broadcasters_without_peer_entry(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Given a broadcaster with no peer entry, when showing state, then it is listed separately."""
    store = InMemoryPresenceStore()
    await store.set_broadcast("ghost", True)
    args = build_parser().parse_args(["state"])

    await run_command(store, args)

    out = capsys.readouterr().out
    assert "Broadcasting without peer entry (1):" in out
    assert "ghost" in out


@pytest.mark.asyncio
async def test_state_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given --json, when showing state, then sorted lists are printed as JSON."""
    store = await _populated_store()
    args = build_parser().parse_args(["state", "--json"])

    await run_command(store, args)

    data = json.loads(capsys.readouterr().out)
    assert data == {"type": "state", "peers": ["A", "B"], "broadcasting": ["A"]}


@pytest.mark.asyncio
async def test_mutating_commands() -> None:
    """Given mutating commands, when running them in order, then the store reflects each."""
    store = await _populated_store()
    parser = build_parser()

    await run_command(store, parser.parse_args(["add-peer", "C"]))
    await run_command(store, parser.parse_args(["broadcast", "C", "--on"]))
    await run_command(store, parser.parse_args(["remove-peer", "A"]))

    state = await store.state()
    assert state.peers == frozenset({"B", "C"})
    assert state.broadcasting == frozenset({"C"})

    await run_command(store, parser.parse_args(["reset"]))

    assert (await store.state()).peers == frozenset()


@pytest.mark.asyncio
async def test_main_without_command_prints_help() -> None:
    """Given no command, when running main, then it exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        await main([])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_main_reports_unavailable_store(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an unreachable store, when running a command, then an error is printed and exit is 1."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    store = InMemoryPresenceStore()
    store.available = False
    store.close = AsyncMock()  # type: ignore[attr-defined]

    with (
        patch(
            "webrtc_presence.cli.RedisPresenceStore.from_config", return_value=store
        ) as mock_from_config,
        pytest.raises(SystemExit) as exc_info,
    ):
        await main(["--prefix", "ops", "state"])

    assert exc_info.value.code == 1
    assert "Error: Presence store unavailable during state" in capsys.readouterr().err
    assert mock_from_config.call_args[0][0].presence_prefix == "ops"
    store.close.assert_awaited_once()
