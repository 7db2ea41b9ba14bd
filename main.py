#!/usr/bin/env python3
"""
spherecast - A small ray casting renderer

Main entry point for rendering scenes.
"""

import argparse
import logging
import sys
import time

from spherecast.renderer import Renderer, RenderSettings
from spherecast.scene import create_demo_scene, create_original_scene
from spherecast.scene_parser import load_scene, SceneParseError
from spherecast.image import save_image

BUILTIN_SCENES = {
    'demo': create_demo_scene,
    'original': create_original_scene,
}


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='spherecast - A small ray casting renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output sphere.tga
  python main.py --scene original --width 300 --height 300
  python main.py --scene scenes/three_spheres.yaml --scale-color
        '''
    )

    parser.add_argument('--width', type=int, default=None, help='Image width (default: 600)')
    parser.add_argument('--height', type=int, default=None, help='Image height (default: 600)')
    parser.add_argument('--depth', type=float, default=None, help='Forward offset of primary rays (default: 16)')
    parser.add_argument('--output', type=str, default='sphere.tga', help='Output filename')
    parser.add_argument('--scene', type=str, default='demo',
                        help='Built-in scene (demo, original) or a YAML/JSON scene file')
    parser.add_argument('--scale-color', action='store_true',
                        help='Rescale colors against the brightest channel instead of clamping')
    parser.add_argument('--no-shadows', action='store_true', help='Skip shadow queries')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log render details')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # Create scene
    try:
        if args.scene in BUILTIN_SCENES:
            scene = BUILTIN_SCENES[args.scene]()
            settings = RenderSettings()
        else:
            scene, settings = load_scene(args.scene)
    except (SceneParseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Command line overrides
    if args.width is not None:
        settings.width = args.width
    if args.height is not None:
        settings.height = args.height
    if args.depth is not None:
        settings.depth = args.depth
    if args.scale_color:
        settings.scale_color = True
    if args.no_shadows:
        settings.shadows = False

    if settings.width <= 0 or settings.height <= 0:
        print(f"Error: resolution must be positive, got {settings.width}x{settings.height}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("spherecast")
    print("=" * 60)
    print(f"  Scene: {args.scene}")
    print(f"  Spheres: {len(scene.spheres)}")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Shadows: {settings.shadows}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '#' * filled + '-' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()

    image = renderer.render(scene)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")

    try:
        path = save_image(image, args.output, scale_color=settings.scale_color)
    except (OSError, ValueError) as e:
        # Pillow raises ValueError for extensions it cannot encode
        print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
        return 1

    print(f"Saved to: {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
