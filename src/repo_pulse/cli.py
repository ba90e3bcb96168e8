"""CLI entry point for repo-pulse."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-pulse",
        description=(
            "Dashboard of metrics for a public GitHub repository. "
            "Without a URL the interactive dashboard is launched."
        ),
    )
    parser.add_argument(
        "repo_url",
        nargs="?",
        help="Repository URL, e.g. https://github.com/owner/repo. "
             "When given, the analysis runs headless and prints JSON.",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="GitHub personal access token. Defaults to the stored token, "
             "then GITHUB_TOKEN / GH_TOKEN.",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the JSON to this file instead of standard output.",
    )
    return parser


def run_headless(repo_url: str, token: Optional[str], output: Optional[str]) -> int:
    from repo_pulse.analyzer import analyze_repository
    from repo_pulse.config import api_base_url, resolve_token
    from repo_pulse.errors import RepoPulseError

    try:
        view_model = asyncio.run(
            analyze_repository(
                repo_url,
                token=resolve_token(token),
                base_url=api_base_url(),
            )
        )
    except RepoPulseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    payload = view_model.to_json()
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", encoding="utf-8")
        print(f"✅ Analysis written to {path.resolve()}", file=sys.stderr)
    else:
        print(payload)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Launch the Repo Pulse TUI, or analyse one URL headless."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN)

    from repo_pulse.logging_config import setup_logging

    args = build_parser().parse_args(argv)

    if args.repo_url:
        setup_logging(tui=False)
        return run_headless(args.repo_url, args.token, args.output)

    setup_logging(tui=True)

    from repo_pulse.app import RepoPulseApp

    app = RepoPulseApp(token=args.token)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
