# src/reposcope/cli.py
import sys
import argparse
import os
from pathlib import Path

from reposcope.analysis.llm import ReportGenerator
from reposcope.config import DEFAULT_MAX_CHARS, DEFAULT_MAX_FILES, DEFAULT_MODEL, DEFAULT_TEMPERATURE, load_settings
from reposcope.core.summary import RepoSampler
from reposcope.core.tree import render_tree
from reposcope.errors import ConfigurationError, ReposcopeError
from reposcope.models import ScanConfig
from reposcope.utils.tokenizer import estimate_tokens


def non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="reposcope",
        description="Sample a directory tree into a bounded snapshot and ask a language model for an analysis report.",
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=None, help="Directory to analyze (default: current)")
    parser.add_argument("-d", "--dir", type=str, default=None, help="Directory to analyze (same as the positional argument)")
    parser.add_argument("-p", "--prompt", type=str, default=None, help="Extra guidance for the agent (e.g., focus on security)")
    parser.add_argument("-m", "--model", type=str, default=None, help=f"OpenAI model (default: {DEFAULT_MODEL})")
    parser.add_argument("-t", "--temperature", type=float, default=None, help=f"Sampling temperature (default: {DEFAULT_TEMPERATURE})")
    parser.add_argument("--max-files", type=non_negative_int, default=DEFAULT_MAX_FILES, help=f"Cap the number of files read (default: {DEFAULT_MAX_FILES})")
    parser.add_argument("--max-chars", type=non_negative_int, default=DEFAULT_MAX_CHARS, help=f"Cap per-file characters read (default: {DEFAULT_MAX_CHARS})")
    parser.add_argument("-o", "--out", type=str, default=None, help="Save report to a file (default: prints to stdout)")
    parser.add_argument("--sniff-binary", action="store_true", help="Also skip files whose first KB contains NUL bytes")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be sent without calling the model")
    parser.add_argument("-v", "--verbose", action="store_true", help="Report skipped files")
    return parser


def write_report(out: str, report: str) -> Path:
    out_path = Path(out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(report, encoding="utf-8")
    return out_path


def main(argv=None):
    try:
        # 1. Setup
        args = create_arg_parser().parse_args(argv)

        root_dir = Path(args.dir or args.root_dir or os.getcwd()).resolve()
        if not root_dir.is_dir():
            print(f"Directory does not exist: {root_dir}", file=sys.stderr)
            sys.exit(1)

        config = ScanConfig(
            root_path=str(root_dir),
            max_files=args.max_files,
            max_chars_per_file=args.max_chars,
            sniff_binary=args.sniff_binary,
        )

        # 2. Sampling
        print(f"Analyzing {root_dir} ...")
        sampler = RepoSampler(config, verbose=args.verbose)
        summary = sampler.summarize()

        print(f"Files:  {sampler.included} included, {sampler.skipped} skipped")
        print(f"Tokens: ~{estimate_tokens(summary)} (summary)")

        if args.dry_run:
            print()
            print(render_tree(sampler.included_paths, root_dir.name or "root"), end="")
            return

        # 3. Model call
        settings = load_settings(model=args.model, temperature=args.temperature)
        report = ReportGenerator(settings).generate(summary, args.prompt)

        # 4. Output
        if args.out:
            out_path = write_report(args.out, report)
            print(f"Report saved to {out_path}")
        else:
            title = f"AI Analysis Report - {root_dir.name}"
            print(f"\n===== {title} =====\n")
            print(report)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("  export OPENAI_API_KEY='your-api-key-here'", file=sys.stderr)
        sys.exit(1)

    except ReposcopeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
