"""CLI entry point for replaying an issue_comment webhook payload."""

import argparse
import json
import sys

from dotenv import load_dotenv

from commentbot.config import BotConfig
from commentbot.handler import CommentHandler, PayloadError, RecordingIssueClient
from commentbot.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Decide which operation a comment command requests (dry run)"
    )
    parser.add_argument(
        "event_file",
        help="Path to a GitHub issue_comment webhook payload (JSON)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--slash-trigger",
        action="store_true",
        help="Use the slash trigger (overrides use_slash_trigger env var)",
    )
    args = parser.parse_args(argv)

    config = BotConfig.from_env()
    if args.slash_trigger:
        config.use_slash_trigger = True
    configure_logging(
        level_override=args.log_level or config.log_level,
        format_override=config.log_format,
    )

    try:
        with open(args.event_file, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: could not read {args.event_file}: {e}", file=sys.stderr)
        return 1

    client = RecordingIssueClient()
    handler = CommentHandler(client, config=config)
    try:
        result = handler.handle_payload(payload)
    except PayloadError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # Print summary
    print("\n--- Comment Summary ---")
    print(f"  command: {result.action.type_name or '(none)'}")
    if result.action.value:
        print(f"  value: {result.action.value}")
    status = "SKIPPED" if result.skipped else ("OK" if result.success else "FAILED")
    print(f"  status: {status}")
    if result.detail:
        print(f"  detail: {result.detail}")
    if result.error:
        print(f"  error: {result.error}")
    for operation, op_args in client.calls:
        print(f"  would call: {operation}{op_args!r}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
