#!/usr/bin/env python3
"""
Build a blueprint from a model document and print a summary.

Lists the bone hierarchy with parsed tags, textures, and for every
animation the authored bones and their breakpoints.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]

SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def _print_group(group, depth: int) -> None:
    tags = ", ".join(sorted(tag.name for tag in group.name.tags))
    suffix = f"  [{tags}]" if tags else ""
    print(f"{'  ' * depth}{group.name.raw_name} -> {group.name.name}{suffix}")
    for child in group.groups():
        _print_group(child, depth + 1)


def _print_animation(animation, verbose: bool) -> None:
    print(f"\n[{animation.name}] length={animation.length:.2f}s loop={animation.loop_type.value} "
          f"override={animation.overriding}")
    if animation.empty_animator:
        print("  (no animated bones)")
    for name, animator in sorted(animation.animators.items(), key=lambda item: item[0].raw_name):
        times = ", ".join(f"{point.time:.2f}" for point in animator.points)
        print(f"  {name.raw_name}: {len(animator.points)} points [{times}]")
        if verbose:
            for point in animator.points:
                print(f"    t={point.time:.3f} pos={tuple(round(float(v), 4) for v in point.position.vector)} "
                      f"rot={tuple(round(float(v), 4) for v in point.rotation.vector)} "
                      f"scale={tuple(round(float(v), 4) for v in point.scale.vector)}")
    if animation.script is not None:
        scripts = [entry for entry in animation.script.scripts if not entry.is_empty]
        print(f"  script entries: {len(scripts)}")


def cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a blueprint from a model document and print its bones and animations.",
    )
    parser.add_argument("model", help="Path to the JSON model document.")
    parser.add_argument(
        "--animation",
        action="append",
        help="Only print the named animation (may be repeated).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Build animations on a thread pool of this size.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every sample of every animator.",
    )
    args = parser.parse_args(argv)

    from modelblueprint import BlueprintLoader, ModelFormatError, BlueprintBuildError
    from modelblueprint.config.settings import LOG_FORMAT, LOG_LEVEL

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT)

    try:
        blueprint = BlueprintLoader(max_workers=args.workers).load(args.model)
    except (FileNotFoundError, ModelFormatError, BlueprintBuildError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"{blueprint.name}: scale={blueprint.scale:.2f} "
          f"resolution={blueprint.resolution.width}x{blueprint.resolution.height}")
    print("\nBones:")
    for group in blueprint.groups:
        _print_group(group, 1)

    if blueprint.textures:
        print("\nTextures:")
        for texture in blueprint.textures:
            width, height = texture.size
            print(f"  {texture.name}: {width}x{height} uv={texture.uv_width}x{texture.uv_height}")

    wanted = set(args.animation or [])
    for animation in blueprint.animations.values():
        if wanted and animation.name not in wanted:
            continue
        _print_animation(animation, args.verbose)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI-compatible entry point."""

    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(cli())
