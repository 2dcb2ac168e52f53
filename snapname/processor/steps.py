from collections.abc import Callable
from datetime import datetime

from snapname.logging.logger import Log
from snapname.naming.assembler import assemble, build_timestamp, resolve_extension
from snapname.naming.deriver import FilenameDeriver
from snapname.ocr.orchestrator import FallbackOrchestrator
from snapname.processor.file_store import FileStore
from snapname.processor.pipeline import PipelineContext, PipelineStep
from snapname.sanitizer.base import BaseSanitizer


class ExtractTextStep(PipelineStep):
    def __init__(self, orchestrator: FallbackOrchestrator, preferred_provider: str) -> None:
        self._orchestrator = orchestrator
        self._preferred_provider = preferred_provider

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.extraction = await self._orchestrator.extract_with_fallback(
            context.upload.path,
            self._preferred_provider,
        )
        Log.info(
            f"Extracted {len(context.extraction.raw_text)} chars from "
            f"{context.upload.path.name} via {context.extraction.provider_used}"
        )
        return context


class SanitizeStep(PipelineStep):
    def __init__(self, sanitizer: BaseSanitizer) -> None:
        self._sanitizer = sanitizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before sanitizing")
        context.sanitized = self._sanitizer.sanitize(context.extraction.raw_text)
        return context


class DeriveCoreStep(PipelineStep):
    def __init__(self, deriver: FilenameDeriver) -> None:
        self._deriver = deriver

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.sanitized is None:
            raise ValueError("PipelineContext.sanitized must be set before naming")
        context.core = await self._deriver.derive_core(context.sanitized.text)
        Log.info(f"Filename core '{context.core.value}' ({context.core.source.value})")
        return context


class AssembleFilenameStep(PipelineStep):
    def __init__(self, clock: Callable[[], datetime], use_utc: bool) -> None:
        self._clock = clock
        self._use_utc = use_utc

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.core is None:
            raise ValueError("PipelineContext.core must be set before assembling")
        timestamp = build_timestamp(self._clock(), use_utc=self._use_utc)
        extension = resolve_extension(context.upload.original_name)
        context.filename = assemble(context.core.value, timestamp, extension)
        return context


class PersistFileStep(PipelineStep):
    def __init__(self, file_store: FileStore) -> None:
        self._file_store = file_store

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.filename is None:
            raise ValueError("PipelineContext.filename must be set before persist")
        context.saved_at = self._file_store.move(context.upload.path, context.filename.value)
        Log.info(f"Saved {context.upload.path.name} as {context.saved_at}")
        return context
