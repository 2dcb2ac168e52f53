from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from snapname.naming.models import FilenameCore, FinalFilename
from snapname.ocr.models import ExtractionResult
from snapname.processor.models import UploadedImage
from snapname.sanitizer.models import SanitizedText


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedImage
    extraction: ExtractionResult | None = None
    sanitized: SanitizedText | None = None
    core: FilenameCore | None = None
    filename: FinalFilename | None = None
    saved_at: Path | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
