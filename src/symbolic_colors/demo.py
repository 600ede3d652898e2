# src/symbolic_colors/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def main(argv=None):
    """CLI demo: load a catalog file and resolve symbolic colors (optionally composed) against it."""
    from .core import SymbolicColor
    from .errors import SymbolicColorError
    from .schemes import CatalogScheme, ColorCatalog
    from .settings import set_prefix_matching_enabled
    from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError

    parser = argparse.ArgumentParser(
        prog="symbolic-colors",
        description="Resolve symbolic colors (e.g. primary.lvl1) against a JSON color catalog.",
    )
    parser.add_argument("catalog", help="Path to a catalog JSON file")
    parser.add_argument("names", nargs="+", help="Symbolic color names to resolve")
    parser.add_argument(
        "--blend",
        nargs=2,
        metavar=("OTHER", "RATIO"),
        help="Blend each name with OTHER at RATIO (amount kept from the name)",
    )
    parser.add_argument("--opacity", type=float, help="Overwrite alpha of the result")
    parser.add_argument(
        "--no-prefix-matching",
        action="store_true",
        dest="no_prefix",
        help="Disable dot-segment fallback (exact names only)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.no_prefix:
        set_prefix_matching_enabled(False)

    try:
        blend_ratio = float(args.blend[1]) if args.blend else None
        catalog = ColorCatalog.from_json(Path(args.catalog).expanduser().resolve())
        scheme = CatalogScheme(catalog)

        result = {}
        for name in args.names:
            color = SymbolicColor(name)
            if args.blend:
                color = color.blend(SymbolicColor(args.blend[0]), blend_ratio)
            if args.opacity is not None:
                color = color.opacity(args.opacity)
            resolved = color.resolve(scheme)
            result[name] = {
                "description": color.description,
                "hex": resolved.to_hex(keep_alpha=True) if resolved is not None else None,
            }
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (
        SymbolicColorError,
        ConfigFileNotFound,
        ConfigParseError,
        ConfigTypeError,
        ValueError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
