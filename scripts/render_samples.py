"""Render every sample program to an HTML page."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from logoturtle.config import Config
from logoturtle.loader import save_program_file
from logoturtle.programs import SAMPLES
from logoturtle.svg import draw, save_document


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-o", "--output", type=Path, default=Path("out"))
    parser.add_argument("-c", "--config", type=Path, help="Config JSON")
    parser.add_argument("--json", action="store_true", help="Also write each program as JSON")
    args = parser.parse_args()

    config = Config.load(args.config) if args.config else Config()
    args.output.mkdir(parents=True, exist_ok=True)

    for name, sample in SAMPLES.items():
        path = save_document(draw(config.start_pose(), sample.program, config), args.output / f"{name}.html")
        if args.json:
            save_program_file(sample.program, args.output / f"{name}.json")
        print(f"{name}: {path}")

    print(f"Done: {len(SAMPLES)} samples in {args.output}")


if __name__ == "__main__":
    main()
