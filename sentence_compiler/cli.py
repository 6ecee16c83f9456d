"""
sentc v0.1 - Command Line Interface

Usage:
    sentc ["Sentence text."] [-o report.txt] [--debug] [--emit-ast]
    sentc -f sentence.txt [-o report.txt] [--debug] [--emit-ast]
    python -m sentence_compiler "Sentence text."
"""

import sys
import argparse

DEFAULT_SENTENCE = "Hello, world-wide communication technologies."


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sentc",
        description="sentc v0.1 — lexer and recursive-descent parser for simple English-like sentences",
    )
    parser.add_argument(
        "sentence",
        nargs="?",
        default=DEFAULT_SENTENCE,
        help=f"Sentence to compile (default: {DEFAULT_SENTENCE!r})",
    )
    parser.add_argument("-f", "--file", help="Read the sentence from a text file instead")
    parser.add_argument("-o", "--output", help="Write the report to this path instead of stdout")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print compilation phase info to stderr",
    )
    parser.add_argument(
        "--emit-ast",
        action="store_true",
        dest="emit_ast",
        help="Emit the parsed AST as JSON instead of the text report",
    )

    args = parser.parse_args(argv)

    from .compiler import compile_source, compile_file
    from .report import render_report, ast_to_json

    if args.file:
        try:
            result, rendered = compile_file(
                args.file,
                args.output,
                emit_ast=args.emit_ast,
                debug=args.debug,
            )
        except FileNotFoundError:
            print(f"[sentc] Error: Input file not found: {args.file!r}", file=sys.stderr)
            return 1
    else:
        result = compile_source(args.sentence, debug=args.debug)
        rendered = ast_to_json(result.ast) + "\n" if args.emit_ast else render_report(result)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(rendered)

    if args.output:
        print(f"[sentc] Wrote report → {args.output!r}")
    else:
        sys.stdout.write(rendered)

    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
