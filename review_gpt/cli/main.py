"""
review-gpt command line entry point.

Reads a git diff from ``--input`` or stdin, asks the configured model for a
review and prints the comments as Markdown on stdout. Logs go to stderr.

Exit codes: 0 on success, 1 when the review call fails, 2 for bad input or
configuration.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from review_gpt.cli.config import WRONG_KEY_HINT, ReviewConfig, load_env_file
from review_gpt.cli.reviewer import SERVICE_NAME, print_review, request_review
from review_gpt.llm_adapter import (
    ParameterError,
    ReviewGPTError,
    SamplingParameters,
    UpstreamError,
    create_provider,
)
from review_gpt.llm_adapter.registry import available_aliases
from review_gpt.logging.logger import setup_logging
from review_gpt.observability.metrics import write_metrics

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REVIEW_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="review-gpt",
        description="Review a git diff with an OpenAI model.",
    )
    parser.add_argument(
        "-i", "--input",
        help="The input (git diff file.txt). Reads stdin when omitted.",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        dest="json_output",
        help="If the log output is in JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="If the output is verbose",
    )
    parser.add_argument(
        "-m", "--model",
        default="turbo",
        help=f"The model for GPT, one of: {', '.join(available_aliases())}",
    )
    parser.add_argument(
        "--max",
        type=int,
        default=1000,
        dest="max_tokens",
        help="The maximum number of tokens to generate",
    )
    parser.add_argument(
        "-t", "--temp",
        type=float,
        default=0.5,
        dest="temperature",
        help=(
            "What sampling temperature to use, between 0 and 1. Higher values "
            "make the output more random, lower values make it more focused "
            "and deterministic."
        ),
    )
    parser.add_argument(
        "--topp",
        type=float,
        default=1.0,
        dest="top_p",
        help=(
            "Nucleus sampling: the model considers the tokens comprising the "
            "top_p probability mass. 0.1 means only the top 10%% are considered."
        ),
    )
    parser.add_argument(
        "-f", "--freq", "--frequence", "--fr",
        type=float,
        default=0.0,
        dest="frequency_penalty",
        help=(
            "Number between -2.0 and 2.0. Positive values penalize tokens by "
            "their existing frequency, discouraging verbatim repetition."
        ),
    )
    parser.add_argument(
        "-p", "--pres", "--presence", "--pr",
        type=float,
        default=0.0,
        dest="presence_penalty",
        help=(
            "Number between -2.0 and 2.0. Positive values penalize tokens that "
            "already appeared, encouraging new topics."
        ),
    )
    parser.add_argument(
        "--bo", "--bestof", "--best",
        type=int,
        default=1,
        dest="best_of",
        help=(
            "Generates best_of completions server-side and returns the best "
            "one. Legacy models only; ignored by chat models."
        ),
    )
    return parser


def read_diff(path: str | None) -> str:
    if path:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    if sys.stdin.isatty():
        raise ValueError("No diff provided. Pipe a git diff in or pass --input.")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(SERVICE_NAME, json_output=args.json_output, verbose=args.verbose)

    load_env_file()
    try:
        cfg = ReviewConfig.from_env()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_BAD_INPUT

    try:
        return _run(args, cfg)
    finally:
        if cfg.metrics_file:
            try:
                write_metrics(cfg.metrics_file)
            except OSError as exc:
                logger.error("Could not write metrics to %s: %s", cfg.metrics_file, exc)


def _run(args: argparse.Namespace, cfg: ReviewConfig) -> int:
    try:
        diff = read_diff(args.input)
    except (OSError, ValueError) as exc:
        logger.error("Could not read the diff: %s", exc)
        return EXIT_BAD_INPUT
    if not diff.strip():
        logger.error("Empty diff, nothing to review")
        return EXIT_BAD_INPUT

    try:
        llm = create_provider(cfg.llm_provider, api_key=cfg.openai_key, timeout=cfg.request_timeout)
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT

    params = SamplingParameters(
        temperature=args.temperature,
        top_p=args.top_p,
        frequency_penalty=args.frequency_penalty,
        presence_penalty=args.presence_penalty,
        max_tokens=args.max_tokens,
        best_of=args.best_of,
    )

    try:
        comments = asyncio.run(request_review(llm, diff, args.model, params))
    except ParameterError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT
    except UpstreamError as exc:
        logger.error(
            "Error while getting improvements: %s",
            exc,
            extra={"_extra": {"type": exc.type, "code": exc.code, "param": exc.param}},
        )
        if exc.code == "invalid_api_key":
            logger.error(WRONG_KEY_HINT)
        return EXIT_REVIEW_FAILED
    except ReviewGPTError as exc:
        logger.error("Error while getting improvements: %s", exc)
        return EXIT_REVIEW_FAILED

    if not comments:
        logger.warning("The model returned no improvements")
        return EXIT_OK

    print_review(comments)
    return EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
