import argparse
import asyncio
import json
import sys
from pathlib import Path

from snapname.config.settings import Settings
from snapname.logging.logger import Log
from snapname.processor.exceptions import RenameFailedError
from snapname.processor.models import UploadedImage
from snapname.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snapname",
        description="Rename a screenshot after the text it contains.",
    )
    parser.add_argument("image", type=Path, help="path to the uploaded image")
    parser.add_argument(
        "--original-name",
        default=None,
        help="original upload filename, used for the extension (default: image name)",
    )
    return parser.parse_args(argv)


async def run(settings: Settings, upload: UploadedImage) -> dict[str, str]:
    """Build dependencies -> process one upload -> release clients."""
    try:
        processor = build_processor(settings)
    except ValueError as exc:
        Log.error(f"Invalid configuration: {exc}")
        raise RenameFailedError() from exc
    try:
        result = await processor.process(upload)
    finally:
        await processor.aclose()
    return result.to_dict()


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings, rename one image, print the JSON result."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    upload = UploadedImage(
        path=args.image,
        original_name=args.original_name or args.image.name,
    )
    try:
        payload = asyncio.run(run(settings, upload))
    except RenameFailedError as exc:
        print(json.dumps({"error": str(exc)}))
        return 1
    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
