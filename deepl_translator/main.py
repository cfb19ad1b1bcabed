"""Entry point: translate one text from the command line."""

import argparse
import asyncio
import logging
import signal
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepl-translate",
        description="Translate text with a configured translation engine.",
    )
    parser.add_argument("text", help="Text to translate")
    parser.add_argument("--to", dest="target_lang", required=True,
                        help="Target language tag (e.g. en-GB)")
    parser.add_argument("--from", dest="source_lang", default=None,
                        help="Source language tag; omit to auto-detect")
    parser.add_argument("--engine", default=None,
                        help="Engine name (default: TRANSLATION_ENGINE)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the translate command."""
    # Import config first so .env files are loaded before settings are read
    from deepl_translator.config import load_settings
    from deepl_translator.engines import load_engine
    from deepl_translator.messages import TRANSLATE_MODE, MessageRequestMeta, request_outcome

    args = build_parser().parse_args(argv)
    settings = load_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    engine_name = args.engine or settings.translation_engine
    try:
        engine = load_engine(engine_name)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    meta = MessageRequestMeta(
        original_text=args.text,
        source_lang=args.source_lang,
        target_lang=args.target_lang,
        mode=TRANSLATE_MODE,
    )

    async def run() -> int:
        cancel = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, cancel.set)

        logger.debug("Translating with engine=%s", engine_name)
        try:
            outcome = await request_outcome(engine, meta, signal=cancel)
        finally:
            await engine.close()

        if outcome.status == "cancelled":
            logger.info("Translation cancelled")
            return 130
        if not outcome.ok:
            print(outcome.error, file=sys.stderr)
            return 1
        print(outcome.content)
        return 0

    return asyncio.run(run())


if __name__ == "__main__":
    sys.exit(main())
