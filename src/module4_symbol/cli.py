# file: src/module4_symbol/cli.py

"""
Command-line interface: encode text into PDF417 codewords.

Examples:
  # Default symbol (6 columns, security level 2) as JSON
  python -m src.module4_symbol "HELLO WORLD"

  # 10 columns, level 4, listing the physical patterns in hex
  python -m src.module4_symbol "HELLO WORLD" --columns 10 --security-level 4 --format hex

  # Non-Latin text as UTF-8 bytes
  python -m src.module4_symbol "Grüße" --encoding utf-8
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..module2_data_encoding import EncodingError
from .config import load_config
from .errors import ConfigurationError
from .pdf417 import PDF417
from .renderer import CodewordTableRenderer


EXIT_OK = 0
EXIT_ENCODING_ERROR = 1
EXIT_CONFIG_ERROR = 2

OUTPUT_FORMATS = ("json",) + CodewordTableRenderer.FORMATS


def setup_logging(verbose: bool = False):
    """Configure logging for the command line."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.module4_symbol",
        description="Encode data into PDF417 codewords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )

    parser.add_argument(
        "data",
        nargs="?",
        help="Data to encode (read from stdin when omitted)"
    )
    parser.add_argument(
        "--config",
        help="YAML configuration file (default: packaged default_config.yaml)"
    )
    parser.add_argument(
        "--columns",
        help="Number of data columns, 1-30 (overrides config)"
    )
    parser.add_argument(
        "--security-level",
        help="Error correction level, 0-8 (overrides config)"
    )
    parser.add_argument(
        "--encoding",
        help="Encode the text to bytes with this codec before compaction"
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (overrides config)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress information"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    data = args.data if args.data is not None else sys.stdin.read()

    try:
        config = load_config(args.config)

        # An empty 'symbol:' section still takes command-line overrides
        if config.get("symbol") is None:
            config["symbol"] = {}
        symbol = config["symbol"]
        if isinstance(symbol, dict):
            if args.columns is not None:
                symbol["columns"] = args.columns
            if args.security_level is not None:
                symbol["security_level"] = args.security_level

        encoder = PDF417.from_config(config)

        output = config.get("output") or {}
        if not isinstance(output, dict):
            raise ConfigurationError(f"'output' section must be a mapping, got {type(output).__name__}")

        fmt = args.format or output.get("format", "json")
        if fmt not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format {fmt!r}, expected one of {OUTPUT_FORMATS}")
        encoding = args.encoding or output.get("encoding")
    except ConfigurationError as e:
        logging.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    logging.info(
        f"Encoding {len(data)} characters with {encoder.columns} columns, "
        f"security level {encoder.security_level}"
    )

    try:
        payload = data.encode(encoding) if encoding else data
        barcode = encoder.encode(payload)
    except (EncodingError, UnicodeEncodeError, LookupError) as e:
        logging.error(f"Cannot encode data: {e}")
        return EXIT_ENCODING_ERROR

    logging.info(f"Symbol: {barcode.rows} rows x {barcode.columns} columns, {len(barcode.code_words)} codewords")

    if fmt == "json":
        print(json.dumps(barcode.to_dict()))
    else:
        print(CodewordTableRenderer(fmt).render(barcode))

    return EXIT_OK
