"""CHIP-8 interpreter package."""

from octavm.state import EmulatorState, create_state
from octavm.emulator import execute, fetch, step
from octavm.decode import DecodedInstruction, decode, disassemble
from octavm.constants import *
from octavm.errors import OctaVMError, UnimplementedInstruction, AddressOutOfRange
from octavm.config import MachineConfig, load_config
from octavm.machine import Machine
from octavm.rendering import display_to_text, chip8_display_to_rgb, create_color_scheme

__all__ = [
    "EmulatorState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "DecodedInstruction",
    "decode",
    "disassemble",
    "PROGRAM_START",
    "MEMORY_SIZE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "OctaVMError",
    "UnimplementedInstruction",
    "AddressOutOfRange",
    "MachineConfig",
    "load_config",
    "Machine",
    "display_to_text",
    "chip8_display_to_rgb",
    "create_color_scheme",
]
