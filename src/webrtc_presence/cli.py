"""Admin CLI for inspecting and maintaining presence state."""

import argparse
import asyncio
import json
import logging
import sys

from webrtc_presence.adapters.config import AppConfig
from webrtc_presence.adapters.redis_store import RedisPresenceStore
from webrtc_presence.domain.contracts.presence_store import PresenceStoreProtocol
from webrtc_presence.domain.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the admin CLI."""
    parser = argparse.ArgumentParser(
        description="WebRTC presence admin tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show connected and broadcasting peers
  webrtc-presence state

  # Same, as JSON
  webrtc-presence state --json

  # Clear presence for the configured namespace
  webrtc-presence reset

  # Drop a stale peer
  webrtc-presence remove-peer 3f2a9c

Connection settings come from REDIS_URL and PRESENCE_PREFIX (or a .env file).
        """,
    )
    parser.add_argument("--prefix", help="Override the presence key namespace prefix")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    state_parser = subparsers.add_parser("state", help="Show connected and broadcasting peers")
    state_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("reset", help="Clear both presence sets")

    add_parser = subparsers.add_parser("add-peer", help="Mark a peer as connected")
    add_parser.add_argument("peer_id", help="Peer ID")

    remove_parser = subparsers.add_parser(
        "remove-peer", help="Remove a peer from the connected and broadcasting sets"
    )
    remove_parser.add_argument("peer_id", help="Peer ID")

    broadcast_parser = subparsers.add_parser("broadcast", help="Set a peer's broadcast flag")
    broadcast_parser.add_argument("peer_id", help="Peer ID")
    toggle = broadcast_parser.add_mutually_exclusive_group(required=True)
    toggle.add_argument("--on", dest="enabled", action="store_true", help="Mark as broadcasting")
    toggle.add_argument("--off", dest="enabled", action="store_false", help="Unmark")

    return parser


async def run_command(store: PresenceStoreProtocol, args: argparse.Namespace) -> None:
    """Execute a parsed command against a presence store."""
    if args.command == "state":
        state = await store.state()
        if args.json:
            print(json.dumps(state.to_message("state"), indent=2))
        else:
            print(f"\nPeers ({len(state.peers)}):")
            for peer_id in sorted(state.peers):
                marker = " [broadcasting]" if state.is_broadcasting(peer_id) else ""
                print(f"  {peer_id}{marker}")
            # Broadcasters whose peer entry is gone (set_broadcast does not check membership)
            orphans = sorted(state.broadcasting - state.peers)
            if orphans:
                print(f"\nBroadcasting without peer entry ({len(orphans)}):")
                for peer_id in orphans:
                    print(f"  {peer_id}")

    elif args.command == "reset":
        await store.reset()
        print("Presence state cleared.")

    elif args.command == "add-peer":
        await store.add_peer(args.peer_id)
        print(f"Added peer {args.peer_id}.")

    elif args.command == "remove-peer":
        await store.remove_peer(args.peer_id)
        print(f"Removed peer {args.peer_id}.")

    elif args.command == "broadcast":
        await store.set_broadcast(args.peer_id, args.enabled)
        print(f"Peer {args.peer_id} broadcasting: {'on' if args.enabled else 'off'}.")


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    if args.prefix is not None:
        config.presence_prefix = args.prefix

    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    logger.debug(f"Running command '{args.command}'")
    store = RedisPresenceStore.from_config(config)
    try:
        await run_command(store, args)
    except StoreUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        await store.close()


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
