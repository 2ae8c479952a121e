#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Print the komparisi paragraph for one or more KTP images.

    python process_image.py ktp1.jpg ktp2.png
    python process_image.py ktp1.jpg --html
"""

import argparse
import asyncio
import logging
import os
import sys
import time

from komparisi.batch import BatchLimitError, check_batch_size, narrate_images
from komparisi.imgprep.prepare import detect_mime_type
from komparisi.models import UploadedImage
from komparisi.utils.async_ocr import ExtractionError, close_http_session
from komparisi.utils.logger_config import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Susun kalimat komparisi dari gambar KTP")
    parser.add_argument("images", nargs="+", type=str, help="Path gambar KTP")
    parser.add_argument(
        "--html", action="store_true", help="Output dengan markup HTML (<b>) seperti di bot"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Tampilkan log proses"
    )
    return parser.parse_args(argv)


def load_images(paths):
    images = []
    for path in paths:
        with open(path, "rb") as f:
            data = f.read()
        images.append(
            UploadedImage(
                file_name=os.path.basename(path),
                mime_type=detect_mime_type(data),
                data=data,
            )
        )
    return images


async def run(images, html: bool):
    try:
        return await narrate_images(images, html=html)
    finally:
        await close_http_session()


def main(argv=None):
    args = parse_args(argv)
    configure_logging(
        environment="development" if args.verbose else "production",
        to_files=False,
    )
    if not args.verbose:
        logging.getLogger().setLevel(logging.WARNING)

    missing = [path for path in args.images if not os.path.exists(path)]
    if missing:
        print(f"Error: file tidak ditemukan: {', '.join(missing)}", file=sys.stderr)
        return 1

    try:
        check_batch_size(0, len(args.images))
    except BatchLimitError as e:
        print(
            f"Error: total file tidak boleh melebihi {e.max_files} file. "
            f"Saat ini ada {e.incoming} file.",
            file=sys.stderr,
        )
        return 1

    try:
        images = load_images(args.images)
        start_time = time.time()
        paragraphs = asyncio.run(run(images, html=args.html))
    except asyncio.TimeoutError:
        print("Error: waktu pemrosesan habis, silakan coba lagi.", file=sys.stderr)
        return 1
    except (ExtractionError, OSError) as e:
        print(f"Error: gagal mengekstrak informasi: {e}", file=sys.stderr)
        return 1

    for image, paragraph in zip(images, paragraphs):
        print(f"# {image.file_name}")
        print(paragraph)
        print()

    logger.info(f"Processed {len(paragraphs)} image(s) in {time.time() - start_time:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
