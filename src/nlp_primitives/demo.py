import argparse
import json
import logging
import os
import sys


def _run_tokenize(args):
    from .preprocessing.token import tokenize_pipeline

    text = " ".join(args.text) or "i'll we're i've couldn't ain't i'm could've they'd"
    tokens = tokenize_pipeline(
        text,
        expand_clitics=not args.no_expand,
        drop_boundaries=not args.keep_boundaries,
    )
    return [tok.to_dict() for tok in tokens]


def _run_distance(args):
    from .preprocessing.fuzzy import edit_distance, similarity

    return {
        "source": args.source,
        "target": args.target,
        "distance": edit_distance(args.source, args.target),
        "similarity": similarity(args.source, args.target),
    }


def _enable_debug():
    from .preprocessing.utils import reload_topics
    from .preprocessing.utils.log import DEBUG_TOPICS_ENV

    os.environ[DEBUG_TOPICS_ENV] = "all"
    reload_topics()
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    """CLI demo: tokenize text (with clitic expansion) or score two strings, printing JSON."""
    parser = argparse.ArgumentParser(
        prog="nlp-primitives-demo",
        description="Tokenize text with byte offsets, or compute a grapheme edit distance.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tok = sub.add_parser("tokenize", help="Print the token stream as JSON")
    p_tok.add_argument(
        "text",
        nargs="*",
        help="Text to tokenize (e.g. I couldn't find it)",
    )
    p_tok.add_argument("--no-expand", action="store_true", help="Keep contractions glued")
    p_tok.add_argument(
        "--keep-boundaries",
        action="store_true",
        help="Keep single space / newline segments",
    )
    p_tok.set_defaults(run=_run_tokenize)

    p_dist = sub.add_parser("distance", help="Print edit distance and similarity as JSON")
    p_dist.add_argument("source")
    p_dist.add_argument("target")
    p_dist.set_defaults(run=_run_distance)

    args = parser.parse_args(argv)
    if args.debug:
        _enable_debug()

    try:
        result = args.run(args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
