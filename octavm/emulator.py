"""Main CHIP-8 emulator execution engine."""

import jax
import jax.lax
import jax.numpy as jnp
from octavm.state import EmulatorState
from octavm.decode import decode
from octavm.constants import MEMORY_SIZE, FAULT_NONE, FAULT_ADDRESS_OUT_OF_RANGE
from octavm.instructions.system import execute_system_instruction, execute_unimplemented
from octavm.instructions.control_flow import execute_jump
from octavm.instructions.memory import execute_set, execute_add, execute_set_index
from octavm.instructions.display import execute_display


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)

    return jax.lax.switch(
        decoded_instruction.opcode,
        [
            execute_system_instruction,
            execute_jump,
            execute_unimplemented,  # 2NNN call
            execute_unimplemented,  # 3XNN skip if equal
            execute_unimplemented,  # 4XNN skip if not equal
            execute_unimplemented,  # 5XY0 skip if registers equal
            execute_set,
            execute_add,
            execute_unimplemented,  # 8XYN ALU
            execute_unimplemented,  # 9XY0 skip if registers differ
            execute_set_index,
            execute_unimplemented,  # BNNN jump with offset
            execute_unimplemented,  # CXNN random
            execute_display,
            execute_unimplemented,  # EXnn keypad
            execute_unimplemented,  # FXnn timers and memory
        ],
        state, decoded_instruction
    )


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def fetch(state: EmulatorState) -> tuple[EmulatorState, jnp.uint16]:
    """Fetch next instruction from memory.

    A program counter whose word does not fit in memory records
    FAULT_ADDRESS_OUT_OF_RANGE and yields a zero word.
    """
    in_range = jnp.astype(state.pc, jnp.int32) + 1 < MEMORY_SIZE
    high = jnp.take(state.memory, state.pc, mode="clip")
    low = jnp.take(state.memory, jnp.astype(state.pc, jnp.int32) + 1, mode="clip")
    instruction = jnp.where(in_range, _pack_u16(high, low), jnp.zeros((), dtype=jnp.uint16))
    fault = jnp.where(in_range, state.fault, jnp.full_like(state.fault, FAULT_ADDRESS_OUT_OF_RANGE))
    return state.replace(pc=state.pc + 2, fault=fault), instruction


@jax.jit
def step(state: EmulatorState) -> tuple[EmulatorState, jnp.uint16]:
    """Fetch and execute one instruction, skipping execution if the fetch faulted."""
    state, instruction = fetch(state)
    state = jax.lax.cond(
        state.fault == FAULT_NONE,
        execute,
        lambda state, instruction: state,
        state, instruction
    )
    return state, instruction

