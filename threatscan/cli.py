"""Command-line entry point: analyze one session and print the result."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from threatscan.config import AppConfig
from threatscan.domain.errors import ConfigurationError, NotFoundError
from threatscan.domain.threat import ThreatAnalysisRecord
from threatscan.domain.transcript import TranscriptSegment, TranslationRecord
from threatscan.infrastructure.openai_client import OpenAIClient
from threatscan.infrastructure.weaviate_client import WeaviateClient
from threatscan.services.analysis.analysis_service import ThreatAnalysisService
from threatscan.services.explanation.explanation_generator import short_explanation
from threatscan.services.storage.base import SessionStore
from threatscan.services.storage.memory_store import InMemorySessionStore
from threatscan.services.storage.weaviate_store import WeaviateSessionStore
from threatscan.services.translation.engines import create_translation_engine
from threatscan.services.translation.translation_service import TranslationService
from threatscan.utils.logging import setup_logger

EXIT_NOT_FOUND = 2
EXIT_CONFIG = 3
EXIT_INPUT = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run rule-based threat analysis on a transcribed session",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("session_id", help="Session identifier to analyze")
    parser.add_argument(
        "--input",
        type=Path,
        help="JSON file with segments (and optional translations); "
        "forces the in-memory store",
    )
    parser.add_argument(
        "--translate",
        action="store_true",
        help="Translate non-base-language segments before analyzing",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis record as JSON",
    )
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Do not store the analysis record",
    )
    return parser.parse_args(argv)


def load_session_file(
    path: Path, session_id: str
) -> Tuple[List[TranscriptSegment], List[TranslationRecord]]:
    """Read segments and translations from a JSON file.

    Accepts either a list of segments or an object with ``segments`` and an
    optional ``translations`` mapping of segment id to translated text.
    Segments without an id get a positional one (``seg-0``, ``seg-1``, ...).

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not valid JSON or has the wrong shape
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        data = {"segments": data}
    if not isinstance(data, dict):
        raise ValueError("expected a list of segments or an object with 'segments'")

    segments = []
    for index, item in enumerate(data.get("segments", [])):
        if not isinstance(item, dict):
            raise ValueError(f"segment {index} is not an object")
        if not (item.get("segmentId") or item.get("segment_id")):
            item = {**item, "segmentId": f"seg-{index}"}
        segments.append(TranscriptSegment.from_dict(item, session_id=session_id))
    by_id = {segment.segment_id: segment for segment in segments}

    translations = []
    for segment_id, text in (data.get("translations") or {}).items():
        source = by_id.get(segment_id)
        translations.append(
            TranslationRecord(
                segment_id=segment_id,
                source_language=source.language if source else "",
                source_text=source.text if source else "",
                translated_text=text,
                session_id=session_id,
            )
        )
    return segments, translations


def build_store(config: AppConfig, use_memory: bool) -> SessionStore:
    """Create the configured storage collaborator."""
    if use_memory or config.storage_backend == "memory":
        return InMemorySessionStore()
    if config.weaviate is None:
        raise ConfigurationError("Weaviate storage selected without Weaviate settings")
    client = WeaviateClient(config.weaviate)
    client.connect()
    return WeaviateSessionStore(client, config.weaviate)


def render(record: ThreatAnalysisRecord) -> str:
    """Plain-text rendering of a record for the terminal."""
    lines = [
        f"Session:   {record.session_id}",
        f"Severity:  {record.severity.value} ({short_explanation(record.severity, record.score)})",
        f"Score:     {record.score}",
        f"Segments:  {record.chunks_involved}",
        "",
        record.explanation_text,
    ]
    if record.details:
        lines.append("")
        lines.append("Details:")
        lines.extend(f"- {detail}" for detail in record.details)
    if record.triggered_keywords:
        lines.append("")
        lines.append("Triggered keywords:")
        lines.extend(
            f"  {kw.word} [{kw.category.label}] x{kw.count}"
            for kw in record.triggered_keywords
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution; returns a process exit code."""
    args = parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    # stdout carries the report only
    setup_logger("threatscan", log_file=config.log_file, stream=sys.stderr)

    openai_client: Optional[OpenAIClient] = None
    store: Optional[SessionStore] = None
    try:
        store = build_store(config, use_memory=args.input is not None)

        if args.input is not None:
            try:
                segments, translations = load_session_file(args.input, args.session_id)
            except (OSError, ValueError) as e:
                print(f"❌ Cannot read {args.input}: {e}", file=sys.stderr)
                return EXIT_INPUT
            store.save_segments(args.session_id, segments)
            if translations:
                store.save_translations(args.session_id, translations)

        if args.translate:
            if config.openai is not None:
                openai_client = OpenAIClient(config.openai)
            engine = create_translation_engine(
                config.translation_engine,
                openai_client=openai_client,
                base_language=config.analysis.base_language,
            )
            TranslationService(store, engine).translate_session(args.session_id)

        service = ThreatAnalysisService.from_config(store, config.analysis)
        record = service.analyze_session(args.session_id, persist=not args.no_persist)

    except NotFoundError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG
    finally:
        if openai_client:
            openai_client.close()
        if store:
            store.close()

    if args.json:
        print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
