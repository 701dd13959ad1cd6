"""CHIP-8 emulator state structures."""

import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from octavm.constants import (
    PROGRAM_START, MEMORY_SIZE, NUM_REGISTERS, SCREEN_WIDTH, SCREEN_HEIGHT, FAULT_NONE
)
from octavm.errors import AddressOutOfRange


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    Attributes:
        memory: Byte-addressable memory, addresses 0x000-0xFFE
        V: General registers V0-VF, VF doubles as the collision flag
        pc: Address of the next instruction to fetch
        I: Address register, base of sprite reads
        display: Pixel grid indexed [x, y]
        fault: Fault code of the last operation, FAULT_NONE when healthy
    """
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    display: jnp.ndarray = field(default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_))
    fault: jnp.ndarray = field(default_factory=lambda: jnp.astype(FAULT_NONE, jnp.uint8))


def create_state(rom: bytes = b"") -> EmulatorState:
    """Create initial emulator state with the ROM loaded at 0x200."""
    rom = bytes(rom)
    end = PROGRAM_START + len(rom)
    if end > MEMORY_SIZE:
        raise AddressOutOfRange(end - 1)

    state = EmulatorState()
    if not rom:
        return state
    rom_array = jnp.array(list(rom), dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[PROGRAM_START:end].set(rom_array))
