"""
SRT Overlay Sequencer — CLI Entry Point

Usage:
    python main.py subtitles.srt
    python main.py subtitles.srt -o effects.json
    python main.py subtitles.srt --font-size 36 --no-outline
    python main.py subtitles.srt --play --speed 2
    python main.py --describe
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from config import load_config
from overlay.instructions import format_preview
from overlay.manifest import SCRIPT_MANIFEST, default_parameters
from overlay.player import InstructionPlayer
from overlay.runner import SubtitleOverlayRunner


def setup_logging(level: str = "INFO", log_file: str = None):
    """Configure logging for the application."""
    log_format = (
        "%(asctime)s | %(levelname)-7s | %(name)-20s | %(message)s"
    )
    date_format = "%H:%M:%S"

    # stdout carries the JSON result
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        datefmt=date_format,
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SRT Overlay Sequencer — Convert a SubRip subtitle file into "
                    "timed Wait / ShowText overlay instructions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py talk.srt                       # Print instructions as JSON
  python main.py talk.srt -o effects.json       # Write them to a file
  python main.py talk.srt --preview             # Human-readable timeline
  python main.py talk.srt --play --speed 4      # Replay in the terminal
  python main.py talk.srt --no-outline          # Disable text stroke
  python main.py --describe                     # Manifest + parameter schema
        """
    )

    parser.add_argument(
        "subtitle_file",
        nargs="?",
        type=Path,
        default=None,
        help="Path to the .srt file (default: source.subtitle_file from config.yaml)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write the JSON result to this file instead of stdout"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to custom config.yaml file"
    )

    style = parser.add_argument_group("style")
    style.add_argument("--font-size", type=float, default=None,
                       help="Font size in pixels (default: 48)")
    style.add_argument("--text-color", default=None,
                       help="Text color hex code (default: #FFFFFF)")
    style.add_argument("--outline", dest="outline", action="store_true", default=None,
                       help="Draw a text outline (default)")
    style.add_argument("--no-outline", dest="outline", action="store_false", default=None,
                       help="Disable the text outline")
    style.add_argument("--outline-width", type=float, default=None,
                       help="Outline width in pixels (default: 2)")
    style.add_argument("--outline-color", default=None,
                       help="Outline color hex code (default: #222222)")
    style.add_argument("--container-width", type=int, default=None,
                       help="Text container width in pixels (default: 1200)")

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a readable timeline instead of JSON"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Replay the instructions in the terminal with real delays"
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=None,
        help="Playback rate for --play (default: 1.0)"
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print the script manifest and parameter schema, then exit"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )
    return parser


def print_cue(instruction):
    """Terminal display callback for --play."""
    print(f"  >> {instruction.plain_text}", flush=True)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.describe:
        print(json.dumps(
            {"manifest": SCRIPT_MANIFEST, "parameters": default_parameters()},
            indent=2,
        ))
        return 0

    # ── Load config ──
    config = load_config(args.config)
    config.update_from_args(args)

    # ── Setup logging ──
    log_level = "DEBUG" if args.verbose else ("WARNING" if args.quiet else config.logging.level)
    setup_logging(level=log_level, log_file=config.logging.file)

    if args.play and not config.playback.speed > 0:
        print(f"Error: playback speed must be positive, got {config.playback.speed}",
              file=sys.stderr)
        return 1

    # ── Run ──
    try:
        result = SubtitleOverlayRunner(config).run()

        if not result.success:
            print(f"Error: {result.error_message}", file=sys.stderr)
            return 1

        if args.play:
            player = InstructionPlayer(display=print_cue, speed=config.playback.speed)
            player.play(result.effects)
        elif args.preview:
            print(format_preview(result.effects, max_entries=config.playback.preview_entries))
        else:
            payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
            if args.output:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(payload + "\n", encoding="utf-8")
                logging.info(f"Instructions written to {args.output}")
            else:
                print(payload)

    except KeyboardInterrupt:
        print("\n  [WARN] Interrupted by user.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
