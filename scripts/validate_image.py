#!/usr/bin/env python
"""Script to run the image plausibility check on local files."""
from __future__ import annotations

import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

from cropcare.config import get_settings
from cropcare.models import Accepted, CandidateImage
from cropcare.services.decoding import get_decoder
from cropcare.services.validator import ImageValidator


async def _validate(paths: list[Path], validator: ImageValidator) -> int:
    failures = 0
    for path in paths:
        content = path.read_bytes()
        media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        candidate = CandidateImage(content=content, media_type=media_type, filename=path.name)
        verdict = await validator.validate(candidate)
        print(f"{path}:")
        print(verdict.model_dump_json(indent=2, by_alias=True))
        if not isinstance(verdict, Accepted):
            failures += 1
    return failures


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Check whether images look like crop/leaf photos")
    parser.add_argument("paths", nargs="+", type=Path)
    parser.add_argument("--max_size_mb", type=float, default=settings.max_image_mb)
    parser.add_argument("--min_dimension_px", type=int, default=settings.min_dimension_px)
    parser.add_argument("--min_vegetation_score", type=float, default=settings.min_vegetation_score)
    args = parser.parse_args()

    config = settings.validator_config().model_copy(
        update={
            "max_image_mb": args.max_size_mb,
            "min_dimension_px": args.min_dimension_px,
            "min_vegetation_score": args.min_vegetation_score,
        }
    )
    validator = ImageValidator(config, get_decoder(settings.image_decoder))
    failures = asyncio.run(_validate(args.paths, validator))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
