"""Command-line interface for puredpx"""
import sys
import argparse
import logging
import time
import imageio.v3 as iio

from .dpx import DPX
from .errors import DPXError, OpenFailedError
from .geometry import MAX_IMAGE_SIZE
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    """Command-line interface for puredpx"""
    parser = argparse.ArgumentParser(
        description='Read and convert 16-bit RGBA DPX (Digital Picture Exchange) files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  puredpx frame.dpx                           # Display DPX header info
  puredpx frame.dpx -o frame.tiff             # Convert to 16-bit TIFF
  puredpx frame.dpx -o frame.tiff -v          # Convert with debug logging
  puredpx huge.dpx --max-dimension 1048576    # Raise the dimension limit
        """
    )

    parser.add_argument('input', help='Input DPX file path')
    parser.add_argument('-o', '--output', help='Output image file path (e.g., output.tiff)')
    parser.add_argument('--max-dimension', type=int, default=MAX_IMAGE_SIZE,
                        help=f'Largest accepted width or height (default: {MAX_IMAGE_SIZE})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        dpx = DPX.from_file(args.input)
        print(dpx)

        if args.output:
            print("\nConverting to image...")

            start_decode = time.perf_counter()
            image = dpx.to_image(max_dimension=args.max_dimension)
            decode_time = time.perf_counter() - start_decode
            logger.debug("Decoded %s (%dx%d) in %.2f ms",
                         args.input, image.width, image.height, decode_time * 1000)

            start_save = time.perf_counter()
            iio.imwrite(args.output, image.pixels)
            save_time = time.perf_counter() - start_save

            print(f"Saved to: {args.output}")
            print(f"Image size: {image.width}x{image.height}")
            print(f"Image format: {image.pixels.dtype} ({image.channels} channels, {image.precision})")
            print(f"Decode time: {decode_time*1000:.2f} ms")
            print(f"Save time: {save_time*1000:.2f} ms")

    except OpenFailedError as e:
        logger.debug("Open failed for %s: errno %s", args.input, e.errno)
        print(f"Error: {e.message}")
        return 1
    except DPXError as e:
        logger.debug("Failed to decode %s", args.input, exc_info=True)
        print(f"Error decoding DPX file: {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
