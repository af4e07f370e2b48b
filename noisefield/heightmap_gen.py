import argparse

from .config import NoiseKind, RenderConfig
from .errors import ConfigurationError, OutputError
from .image_sink import save_grayscale
from .sampler import render_config


def build_parser():
    parser = argparse.ArgumentParser(prog="noisefield", description="Generates noise image based on parameters")
    parser.add_argument("--type", "--noise", "-n", dest="type", type=str, choices=NoiseKind.names(), default="simplex", help="Type of noise to generate")
    parser.add_argument("--size", type=int, default=1024, help="Specify the size of the noise image (nxn)")
    parser.add_argument("--out", type=str, default="noise.png", help="File path for the outputted file")
    parser.add_argument("--scale", "-s", type=float, default=2.0, help="Noise-domain units spanned by the image width and height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the permutation table (random if omitted)")
    parser.add_argument("--threads", "-t", type=int, default=1, help="Number of row bands evaluated in parallel (worker processes are capped at the CPU count)")
    return parser


def generate_heightmap(args):
    config = RenderConfig(
        kind=args.type,
        size=args.size,
        scale=args.scale,
        seed=args.seed,
        threads=args.threads,
        out=args.out,
    ).validate()
    seed = config.resolve_seed()
    print(f"Generating with {config.threads} threads and {config.kind.value} noise (seed {seed})")
    grid = render_config(config)
    return save_grayscale(grid, config.out)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        generate_heightmap(args)
    except ConfigurationError as e:
        parser.error(str(e))
    except OutputError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
