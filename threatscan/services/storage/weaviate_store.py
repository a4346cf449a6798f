"""Weaviate-backed session store."""

from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import NAMESPACE_URL, uuid5

from weaviate.classes.query import Filter

from threatscan.config import WeaviateConfig
from threatscan.domain.threat import ThreatAnalysisRecord
from threatscan.domain.transcript import (
    TranscriptSegment,
    TranslationLookup,
    TranslationRecord,
)
from threatscan.infrastructure.weaviate_client import WeaviateClient
from threatscan.services.storage.base import SessionStore
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)

FETCH_LIMIT = 10000


class WeaviateSessionStore(SessionStore):
    """Stores segments, translations and analyses in three collections.

    Object ids are deterministic, so re-uploading a segment overwrites it and
    each session has exactly one analysis object.
    """

    def __init__(self, client: WeaviateClient, config: Optional[WeaviateConfig] = None):
        """Initialize the store.

        Args:
            client: Connected Weaviate client handle
            config: Collection names; defaults to the client's config
        """
        self.client = client
        self.config = config or client.config

    # ------------------------------------------------------------------
    # Transcripts
    # ------------------------------------------------------------------
    def save_segments(self, session_id: str, segments: Iterable[TranscriptSegment]) -> int:
        collection = self.client.collection(self.config.segment_collection)
        uploaded = 0

        with collection.batch.dynamic() as batch:
            for segment in segments:
                properties = segment.as_weaviate_properties()
                properties["sessionId"] = session_id
                batch.add_object(
                    uuid=self._object_uuid("segment", session_id, segment.segment_id),
                    properties=properties,
                )
                uploaded += 1

        logger.info(f"Uploaded {uploaded} segments for session {session_id}")
        return uploaded

    def get_transcript_segments(self, session_id: str) -> List[TranscriptSegment]:
        collection = self.client.collection(self.config.segment_collection)

        logger.info(f"Fetching segments for session {session_id}")
        response = collection.query.fetch_objects(
            filters=Filter.by_property("sessionId").equal(session_id),
            limit=FETCH_LIMIT,
        )

        segments = [
            TranscriptSegment.from_dict(obj.properties, session_id=session_id)
            for obj in response.objects
        ]
        segments.sort(key=lambda s: s.start_time)

        logger.info(f"Fetched {len(segments)} segments")
        return segments

    # ------------------------------------------------------------------
    # Translations
    # ------------------------------------------------------------------
    def save_translations(
        self, session_id: str, translations: Iterable[TranslationRecord]
    ) -> int:
        collection = self.client.collection(self.config.translation_collection)
        uploaded = 0

        with collection.batch.dynamic() as batch:
            for translation in translations:
                properties = translation.as_weaviate_properties()
                properties["sessionId"] = session_id
                batch.add_object(
                    uuid=self._object_uuid(
                        "translation", session_id, translation.segment_id
                    ),
                    properties=properties,
                )
                uploaded += 1

        logger.info(f"Uploaded {uploaded} translations for session {session_id}")
        return uploaded

    def get_translations(self, session_id: str) -> TranslationLookup:
        collection = self.client.collection(self.config.translation_collection)

        response = collection.query.fetch_objects(
            filters=Filter.by_property("sessionId").equal(session_id),
            limit=FETCH_LIMIT,
        )

        translations = {}
        for obj in response.objects:
            props = obj.properties
            segment_id = props.get("segmentId")
            if segment_id:
                translations[segment_id] = props.get("translatedText", "")

        logger.info(f"Fetched {len(translations)} translations")
        return translations

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------
    def save_analysis(self, record: ThreatAnalysisRecord) -> None:
        collection = self.client.collection(self.config.analysis_collection)
        object_id = self._object_uuid("analysis", record.session_id)
        properties = record.as_weaviate_properties()

        if collection.data.exists(object_id):
            collection.data.replace(uuid=object_id, properties=properties)
        else:
            collection.data.insert(properties=properties, uuid=object_id)

        logger.info(f"Stored threat analysis {record.analysis_id}")

    def get_analysis(self, session_id: str) -> Optional[ThreatAnalysisRecord]:
        collection = self.client.collection(self.config.analysis_collection)
        obj = collection.query.fetch_object_by_id(
            self._object_uuid("analysis", session_id)
        )
        if obj is None:
            return None
        return ThreatAnalysisRecord.from_weaviate_properties(obj.properties)

    def list_analyses(self) -> List[ThreatAnalysisRecord]:
        collection = self.client.collection(self.config.analysis_collection)
        return [
            ThreatAnalysisRecord.from_weaviate_properties(obj.properties)
            for obj in collection.iterator()
        ]

    def delete_analysis(self, session_id: str) -> bool:
        collection = self.client.collection(self.config.analysis_collection)
        deleted = bool(
            collection.data.delete_by_id(self._object_uuid("analysis", session_id))
        )
        if deleted:
            logger.info(f"Deleted threat analysis for session {session_id}")
        return deleted

    def delete_all_analyses(self) -> int:
        collection = self.client.collection(self.config.analysis_collection)
        result = collection.data.delete_many(
            where=Filter.by_property("sessionId").like("*")
        )
        deleted = result.matches if hasattr(result, "matches") else 0
        logger.info(f"Deleted {deleted} threat analyses")
        return deleted

    def close(self) -> None:
        self.client.close()

    @staticmethod
    def _object_uuid(kind: str, session_id: str, key: str = "") -> str:
        """Deterministic object id from kind, session and key."""
        return str(uuid5(NAMESPACE_URL, f"{kind}:{session_id}:{key}"))
