#!/usr/bin/env python
"""Print the token stream of one or more source files."""

from __future__ import annotations

import argparse
from pathlib import Path

from colloid.lexer import dump_tokens, format_token_result
from colloid.pipeline import run_lex_file


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump colloid tokens for source files")
    parser.add_argument("paths", type=Path, nargs="+", help="Source files to tokenize")
    parser.add_argument("--encoding", type=str, default="utf-8", help="Source encoding (default: utf-8)")
    parser.add_argument(
        "--errors-only",
        action="store_true",
        help="Print only the lexical errors instead of the full token stream",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 if any file produced lexical errors",
    )
    args = parser.parse_args()

    missing = [path for path in args.paths if not path.is_file()]
    if missing:
        raise SystemExit(f"No such file: {', '.join(str(path) for path in missing)}")

    error_count = 0
    for path in args.paths:
        result = run_lex_file(path, encoding=args.encoding)
        error_count += len(result.errors)
        print(f"===== {path} ({len(result.results)} results, {len(result.errors)} errors) =====")
        if args.errors_only:
            for error in result.errors:
                print(format_token_result(error))
        else:
            dump_tokens(result.results)

    if args.fail_on_error and error_count:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
