import shutil
from pathlib import Path

from snapname.logging.logger import Log
from snapname.processor.exceptions import PersistenceError


class FileStore:
    """Moves uploaded files into the output directory under their new name."""

    OUTPUT_DIR = Path("out")

    def __init__(self, output_dir: Path | None = None) -> None:
        self._output_dir = output_dir if output_dir is not None else self.OUTPUT_DIR

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def move(self, source: Path, filename: str) -> Path:
        """Move *source* to ``{output_dir}/{filename}``, creating the directory.

        An existing file is never replaced: the stem gets a ``_2``, ``_3``, ...
        suffix until the name is free.

        Raises:
            PersistenceError: if the directory cannot be created or the move fails.
        """
        destination = self._output_dir / filename
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            destination = self._free_destination(destination)
            shutil.move(str(source), str(destination))
        except OSError as exc:
            raise PersistenceError(f"Cannot save {source} to {destination}: {exc}") from exc
        return destination

    @staticmethod
    def _free_destination(destination: Path) -> Path:
        if not destination.exists():
            return destination
        counter = 2
        candidate = destination.with_name(f"{destination.stem}_{counter}{destination.suffix}")
        while candidate.exists():
            counter += 1
            candidate = destination.with_name(f"{destination.stem}_{counter}{destination.suffix}")
        Log.warning(f"{destination.name} already exists, saving as {candidate.name}")
        return candidate
