"""CHIP-8 control flow instructions."""

import jax.numpy as jnp
from octavm.state import EmulatorState
from octavm.decode import DecodedInstruction


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN.

    The target is not checked here; a target whose word does not fit in
    memory faults on the next fetch.
    """
    return state.replace(pc=jnp.astype(instruction.nnn, jnp.uint16))
