import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from performscan.core.config import settings
from performscan.core.logger import setup_logging
from performscan.analysis.analyzer import analyze_file
from performscan.pipeline.source_loader import SourceReadError
from performscan.reports.render import RENDERERS

logger = logging.getLogger(__name__)

USAGE = "performscan <startFunction> <filePath> [--format {text,json,mermaid}]"

class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with exit status 1 instead of argparse's 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="performscan",
        usage=USAGE,
        description=(
            "Builds the PERFORM call tree of a COBOL program from a start paragraph "
            "and fails if any reachable paragraph uses EXEC SQL."
        ),
    )
    parser.add_argument("start_function", nargs="?", help="Paragraph to start from, e.g. 000-MAIN.")
    parser.add_argument("file_path", nargs="?", help="COBOL source file to analyze.")
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default=settings.OUTPUT_FORMAT,
        help="Report format (default: %(default)s).",
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.start_function or not args.file_path:
        print(f"Usage: {USAGE}", file=sys.stderr)
        return 1

    setup_logging()
    file_path = Path(args.file_path).resolve()

    try:
        result = analyze_file(file_path, args.start_function)
    except SourceReadError as e:
        logger.critical(f"Could not read '{e.path}'.")
        print(f"Error reading file: {e.reason}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.critical(f"Analysis of '{file_path}' failed: {e}", exc_info=True)
        return 1

    print(RENDERERS[args.format](result))

    if args.format == "text":
        if result.uses_sql:
            print("ERROR: EXEC SQL found in the call tree.", file=sys.stderr)
        else:
            print("SUCCESS: No EXEC SQL found in the call tree.")

    return 1 if result.uses_sql else 0

if __name__ == "__main__":
    sys.exit(main())
