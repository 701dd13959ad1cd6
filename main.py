"""
Run a CHIP-8 ROM for a fixed number of instructions and print the display
"""

import argparse

from octavm import Machine, OctaVMError, load_config
from octavm.rendering import save_frame


def run_rom(rom_filename, steps=700, config_file=None, image=None, **overrides):
    """Run ``steps`` instructions and print the final screen."""
    config = load_config(config_file, **overrides)
    machine = Machine.from_file(rom_filename, config=config)

    try:
        machine.run(steps)
    except OctaVMError:
        machine.logger.warning(f"Stopped after {machine.steps} instructions")

    print(machine.render())
    if image:
        save_frame(machine.state.display, image)
        machine.logger.info(f"Saved frame to {image}")
    return machine


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a CHIP-8 ROM")
    parser.add_argument("rom", type=str, help="Path to the ROM image")
    parser.add_argument("--steps", type=int, default=700, help="Instructions to execute (default: 700)")
    parser.add_argument("--config", type=str, default=None, help="YAML machine configuration")
    parser.add_argument("--image", type=str, default=None, help="Also save the final frame as PNG")
    parser.add_argument("--trace", action="store_true", help="Log every instruction")
    args = parser.parse_args()

    overrides = {"trace": True, "log_level": "DEBUG"} if args.trace else {}
    run_rom(args.rom, args.steps, args.config, args.image, **overrides)
