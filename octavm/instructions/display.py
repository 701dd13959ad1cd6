"""CHIP-8 display operations."""

import jax
import jax.numpy as jnp
from octavm.state import EmulatorState
from octavm.decode import DecodedInstruction
from octavm.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH, MEMORY_SIZE, FLAG_REGISTER, FAULT_ADDRESS_OUT_OF_RANGE
)

# Pre-computed coordinate grids for display operations
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


def sprite_mask(memory: jnp.ndarray, index: jnp.ndarray, anchor_x, anchor_y, height) -> jnp.ndarray:
    """Project an 8-wide sprite onto a screen-sized boolean mask.

    Cells outside the screen never appear in the mask, so columns past the
    right edge are skipped one by one and rows past the bottom edge are
    dropped entirely. Nothing wraps.
    """
    col_offset = xx - anchor_x
    row_offset = yy - anchor_y
    in_sprite = (col_offset >= 0) & (col_offset < SPRITE_WIDTH) & (row_offset >= 0) & (row_offset < height)

    addresses = jnp.astype(index, jnp.int32) + jnp.clip(row_offset, 0, 15)
    sprite_bytes = jnp.take(memory, addresses, mode="clip")
    bits = (sprite_bytes >> (7 - jnp.clip(col_offset, 0, SPRITE_WIDTH - 1))) & 1
    return jnp.astype(bits, jnp.bool_) & in_sprite


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N."""
    sprite_x = jnp.astype(state.V[instruction.x], jnp.int32) % SCREEN_WIDTH
    sprite_y = jnp.astype(state.V[instruction.y], jnp.int32) % SCREEN_HEIGHT
    height = jnp.astype(instruction.n, jnp.int32)

    # Only rows that land on screen are read from memory
    visible_rows = jnp.minimum(height, SCREEN_HEIGHT - sprite_y)
    in_bounds = jnp.astype(state.I, jnp.int32) + visible_rows <= MEMORY_SIZE

    def draw(state: EmulatorState) -> EmulatorState:
        sprite = sprite_mask(state.memory, state.I, sprite_x, sprite_y, height)
        collision = jnp.any(state.display & sprite)
        return state.replace(
            display=state.display ^ sprite,
            V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8))
        )

    def out_of_range(state: EmulatorState) -> EmulatorState:
        return state.replace(fault=jnp.full_like(state.fault, FAULT_ADDRESS_OUT_OF_RANGE))

    return jax.lax.cond(in_bounds, draw, out_of_range, state)
