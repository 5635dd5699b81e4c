"""Repository backing the synthesized-audio cache."""

from __future__ import annotations

import base64
import logging

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tts_bench.models.tts_audio import TTSAudio
from tts_bench.repositories.base import BaseRepository
from tts_bench.services.tts.base import CacheKey

logger = logging.getLogger(__name__)

_CONFLICT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class TTSAudioRepository(BaseRepository[TTSAudio]):
    """Append-only store keyed by (provider, prompt, model, voice)."""

    def __init__(self):
        super().__init__(TTSAudio)

    def probe(self, session: Session, key: CacheKey) -> TTSAudio | None:
        """Return the cached entry for ``key`` or None."""
        return self.first_where(
            session,
            TTSAudio.provider_id == key.provider_id,
            TTSAudio.prompt_id == key.prompt_id,
            TTSAudio.model == key.model,
            TTSAudio.voice == key.voice,
        )

    def insert_if_absent(
        self,
        session: Session,
        key: CacheKey,
        audio: bytes,
        audio_format: str,
    ) -> bool:
        """
        Store audio for ``key`` unless a row already exists.

        Never raises on a duplicate key; a concurrent writer that got there
        first simply wins.

        Returns:
            True if a row was written, False if the key was already present.
        """
        values = {
            "provider_id": key.provider_id,
            "prompt_id": key.prompt_id,
            "model": key.model,
            "voice": key.voice,
            "format": audio_format,
            "audio_base64": base64.b64encode(audio).decode("ascii"),
        }

        dialect = session.get_bind().dialect.name
        insert_factory = _CONFLICT_INSERTS.get(dialect)
        if insert_factory is None:
            return self._insert_with_savepoint(session, values)

        stmt = insert_factory(TTSAudio).values(**values).on_conflict_do_nothing()
        result = session.execute(stmt)
        inserted = bool(result.rowcount)
        if not inserted:
            logger.debug(f"[TTSAudioRepository] Key already cached, write ignored: {key}")
        return inserted

    def _insert_with_savepoint(self, session: Session, values: dict[str, str]) -> bool:
        try:
            with session.begin_nested():
                session.add(TTSAudio(**values))
        except IntegrityError:
            logger.debug("[TTSAudioRepository] Duplicate cache key, write ignored")
            return False
        return True
