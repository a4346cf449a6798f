#!/usr/bin/env python3
"""Initialize or verify the Weaviate collections used by threatscan.

This script:
1. Connects to Weaviate
2. Creates the transcript, translation and analysis collections if missing
3. Verifies each schema and optionally prints object counts
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import weaviate
from dotenv import load_dotenv
from weaviate.classes.config import Configure, DataType, Property
from weaviate.classes.init import Auth
from weaviate.exceptions import WeaviateBaseError

from threatscan.config import WeaviateConfig

# Load environment variables
load_dotenv()


def _prop(name: str, data_type: DataType, description: str, filterable: bool = False):
    return Property(
        name=name,
        data_type=data_type,
        description=description,
        index_filterable=filterable,
        index_searchable=data_type == DataType.TEXT and not filterable,
    )


def collection_schemas(config: WeaviateConfig) -> Dict[str, dict]:
    """Collection name -> description and properties."""
    return {
        config.segment_collection: {
            "description": "Speech-to-text transcript segments per session",
            "properties": [
                _prop("sessionId", DataType.TEXT, "Session identifier", filterable=True),
                _prop("segmentId", DataType.TEXT, "Segment identifier", filterable=True),
                _prop("text", DataType.TEXT, "Transcript text"),
                _prop("language", DataType.TEXT, "Spoken language", filterable=True),
                _prop("startTime", DataType.NUMBER, "Start offset in seconds", filterable=True),
                _prop("confidence", DataType.NUMBER, "STT confidence"),
            ],
        },
        config.translation_collection: {
            "description": "Base-language translations of transcript segments",
            "properties": [
                _prop("sessionId", DataType.TEXT, "Session identifier", filterable=True),
                _prop("segmentId", DataType.TEXT, "Segment identifier", filterable=True),
                _prop("sourceLanguage", DataType.TEXT, "Source language", filterable=True),
                _prop("sourceText", DataType.TEXT, "Original text"),
                _prop("translatedText", DataType.TEXT, "Translated text"),
                _prop("confidence", DataType.NUMBER, "Translation confidence"),
            ],
        },
        config.analysis_collection: {
            "description": "Most recent threat analysis per session",
            "properties": [
                _prop("analysisId", DataType.TEXT, "Analysis identifier", filterable=True),
                _prop("sessionId", DataType.TEXT, "Session identifier", filterable=True),
                _prop("score", DataType.INT, "Threat score", filterable=True),
                _prop("severity", DataType.TEXT, "SAFE / SUSPICIOUS / HIGH_RISK", filterable=True),
                _prop("triggeredKeywords", DataType.TEXT, "JSON list of keyword summaries"),
                _prop("breakdown", DataType.TEXT, "JSON score breakdown"),
                _prop("categoryCounts", DataType.TEXT, "JSON match count per category"),
                _prop("explanationText", DataType.TEXT, "Summary sentence"),
                _prop("details", DataType.TEXT_ARRAY, "Explanation detail lines"),
                _prop("chunksInvolved", DataType.INT, "Segments with matches"),
                _prop("createdAt", DataType.DATE, "Creation timestamp", filterable=True),
            ],
        },
    }


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Initialize Weaviate collections for threat analysis",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--url",
        default=os.getenv("WEAVIATE_URL"),
        help="Weaviate cluster URL (or set WEAVIATE_URL env var)",
    )
    parser.add_argument(
        "--api-key",
        default=os.getenv("WEAVIATE_API_KEY"),
        help="Weaviate API key (or set WEAVIATE_API_KEY env var)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Delete and recreate collections that already exist",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show object counts after initialization",
    )
    return parser.parse_args()


def exit_with_error(message: str) -> None:
    """Print error and exit."""
    print(f"❌ {message}")
    sys.exit(1)


def create_collection(
    client: weaviate.WeaviateClient,
    name: str,
    description: str,
    properties: List[Property],
    force: bool = False,
) -> bool:
    """Create one collection without a vectorizer.

    Returns:
        True if the collection was created, False if it already existed
    """
    if client.collections.exists(name):
        if not force:
            print(f"✓ Collection '{name}' already exists")
            return False
        print(f"⚠️  Collection '{name}' exists. Deleting due to --force flag...")
        client.collections.delete(name)

    client.collections.create(
        name=name,
        description=description,
        vectorizer_config=Configure.Vectorizer.none(),
        properties=properties,
    )
    print(f"✅ Created collection '{name}'")
    return True


def verify_schema(client: weaviate.WeaviateClient, name: str) -> None:
    """Print a collection's properties."""
    config = client.collections.get(name).config.get()
    print(f"🔍 {config.name}: {len(config.properties)} properties")
    for prop in config.properties:
        print(f"   - {prop.name}: {prop.data_type}")


def show_stats(client: weaviate.WeaviateClient, name: str) -> None:
    """Print the object count of a collection."""
    response = client.collections.get(name).aggregate.over_all(total_count=True)
    print(f"📊 {name}: {response.total_count or 0} objects")


def main() -> None:
    """Main execution."""
    args = parse_args()

    if not args.url or not args.api_key:
        exit_with_error(
            "Missing Weaviate credentials. Provide --url and --api-key or set "
            "WEAVIATE_URL and WEAVIATE_API_KEY environment variables"
        )

    config = WeaviateConfig(url=args.url, api_key=args.api_key)
    client = None

    try:
        print(f"🔌 Connecting to Weaviate at {args.url}...")
        client = weaviate.connect_to_weaviate_cloud(
            cluster_url=args.url,
            auth_credentials=Auth.api_key(args.api_key),
        )
        if not client.is_ready():
            exit_with_error("Failed to connect to Weaviate")

        for name, schema in collection_schemas(config).items():
            create_collection(
                client,
                name,
                schema["description"],
                schema["properties"],
                force=args.force,
            )
            verify_schema(client, name)
            if args.stats:
                show_stats(client, name)

    except WeaviateBaseError as e:
        exit_with_error(f"Error: {e}")

    finally:
        if client:
            client.close()


if __name__ == "__main__":
    main()
