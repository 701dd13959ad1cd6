"""CHIP-8 system instructions (0x0xxx) and the unimplemented fallback."""

import jax
import jax.lax
import jax.numpy as jnp
from octavm.state import EmulatorState
from octavm.decode import DecodedInstruction
from octavm.constants import FAULT_UNIMPLEMENTED_INSTRUCTION


def execute_unimplemented(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Record an unimplemented instruction, leaving everything else untouched."""
    return state.replace(fault=jnp.full_like(state.fault, FAULT_UNIMPLEMENTED_INSTRUCTION))


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(display=jnp.zeros_like(state.display))


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch system instructions."""
    return jax.lax.cond(
        0x00E0 == instruction.raw,
        execute_clear_screen,
        execute_unimplemented,
        state, instruction
    )
