"""Command-line interface for terrain generation."""

import argparse
import logging
import time
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate an archetype heightmap with an optional river"
    )
    parser.add_argument(
        "--archetype",
        "-a",
        type=str,
        default="0",
        help="Archetype index or name, e.g. 4 or Valley (default: 0)",
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None, help="TOML config file (optional)"
    )
    parser.add_argument(
        "--size", type=int, default=None, help="Grid cells per side (default: 512)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Fixed random seed (default: config value, random if unset)",
    )
    parser.add_argument(
        "--debug-images",
        type=str,
        default=None,
        help="Directory to save debug images (optional)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Import here to avoid slow startup for --help
    from .archetypes import clamp_index, find_archetype, get_archetype
    from .config import GenerationConfig, load_config
    from .generator import generate_terrain
    from .heightmap import heightmap_stats
    from .validation import validate_terrain

    config = load_config(Path(args.config)) if args.config else GenerationConfig()

    updates: dict = {}
    if args.size is not None:
        updates["size"] = args.size
    if args.seed is not None:
        updates["fixed_seed"] = args.seed
        updates["use_random_seed"] = False
    if args.debug_images is not None:
        updates["debug_output_dir"] = args.debug_images
    if updates:
        config = config.model_copy(update=updates)

    if args.archetype.lstrip("-").isdigit():
        index = int(args.archetype)
    else:
        index = find_archetype(args.archetype)
    archetype = get_archetype(clamp_index(index))

    print(f"Generating {archetype.name} terrain, {config.size}x{config.size}")
    print()

    start_time = time.time()
    result = generate_terrain(index, config)
    gen_time = time.time() - start_time

    validation = validate_terrain(result)
    stats = heightmap_stats(result.heights)

    print()
    print(f"Generation complete in {gen_time:.1f}s (seed {result.seed})")
    print(
        f"Heights: min {stats['min']:.4f}  max {stats['max']:.4f}  "
        f"mean {stats['mean']:.4f}"
    )
    if result.has_river:
        print(f"River: {len(result.river_path)} points")
    else:
        print("River: none")
    print(f"Validation: {'passed' if validation.passed else 'FAILED'}")


if __name__ == "__main__":
    main()
