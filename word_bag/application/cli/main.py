import argparse
from typing import List, Optional

from loguru import logger

from word_bag.application.settings import get_settings
from word_bag.application.log_setup import setup_logging
from word_bag.application.services.bag_of_words import BagOfWords
from word_bag.application.services.report_service import ReportService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-bag",
        description="Build a bag of words from one or more texts and print a summary.",
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="texts to ingest (defaults to DEMO_TEXTS from settings/.env)",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.debug:
        settings = settings.model_copy(update={"debug": True})
    # Configure logging once
    setup_logging(settings)

    texts = args.texts or settings.demo_texts
    logger.debug("Building bag from {} text(s)", len(texts))

    try:
        bag = BagOfWords().extend_from_texts(texts)
    except Exception:
        logger.exception("Failed to build bag of words")
        raise

    report = ReportService(settings=settings)
    for line in report.render(report.summarize(bag)):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
