from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from snapname.config.settings import Settings
from snapname.logging.logger import Log
from snapname.naming.factory import FilenameDeriverFactory
from snapname.ocr.factory import OcrProviderFactory
from snapname.ocr.orchestrator import FallbackOrchestrator
from snapname.processor.exceptions import RenameFailedError
from snapname.processor.file_store import FileStore
from snapname.processor.models import RenameResult, UploadedImage
from snapname.processor.pipeline import PipelineContext, PipelineStep
from snapname.processor.steps import (
    AssembleFilenameStep,
    DeriveCoreStep,
    ExtractTextStep,
    PersistFileStep,
    SanitizeStep,
)
from snapname.sanitizer.factory import SanitizerFactory


class Processor:
    """Runs one upload through the rename pipeline.

    Pipeline: extract -> sanitize -> derive core -> assemble -> persist.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        *,
        use_utc: bool = False,
        preview_chars: int = 800,
        orchestrator: FallbackOrchestrator | None = None,
    ) -> None:
        self._steps = steps
        self._use_utc = use_utc
        self._preview_chars = preview_chars
        self._orchestrator = orchestrator

    async def process(self, upload: UploadedImage) -> RenameResult:
        """Rename one uploaded image.

        Raises:
            RenameFailedError: on any step failure. The cause is logged and
                chained but the message stays generic.
        """
        Log.info(f"Processing upload {upload.path}")
        context = PipelineContext(upload=upload)
        try:
            for step in self._steps:
                context = await step.run(context)
        except Exception as exc:
            Log.error(f"Failed to process {upload.path}: {exc}")
            raise RenameFailedError() from exc
        return self._build_result(context)

    def _build_result(self, context: PipelineContext) -> RenameResult:
        if (
            context.extraction is None
            or context.sanitized is None
            or context.filename is None
            or context.saved_at is None
        ):
            raise RenameFailedError()
        return RenameResult(
            suggested_name=context.filename.value,
            timestamp=context.filename.timestamp,
            timezone="UTC" if self._use_utc else "local",
            ocr_provider=context.extraction.provider_used,
            ocr_preview=context.sanitized.text[: self._preview_chars],
            saved_at=context.saved_at,
        )

    async def aclose(self) -> None:
        if self._orchestrator is not None:
            await self._orchestrator.aclose()


def build_processor(
    settings: Settings,
    output_dir: Path | None = None,
    clock: Callable[[], datetime] | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    orchestrator = OcrProviderFactory.create_orchestrator(settings)
    sanitizer = SanitizerFactory.create(settings)
    deriver = FilenameDeriverFactory.create(settings)
    file_store = FileStore(
        output_dir=output_dir if output_dir is not None else Path(settings.output_dir)
    )
    steps: list[PipelineStep] = [
        ExtractTextStep(orchestrator, settings.ocr_provider),
        SanitizeStep(sanitizer),
        DeriveCoreStep(deriver),
        AssembleFilenameStep(clock or (lambda: datetime.now(timezone.utc)), settings.use_utc),
        PersistFileStep(file_store),
    ]
    return Processor(
        steps,
        use_utc=settings.use_utc,
        preview_chars=settings.preview_chars,
        orchestrator=orchestrator,
    )
